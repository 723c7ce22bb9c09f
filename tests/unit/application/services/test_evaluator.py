"""Tests for application/services/evaluator.py."""

import pytest

from membercheck.application.services.evaluator import Expectation, evaluate, verify
from membercheck.domain.exceptions import MemberAssertionError, ReasonFormatError
from membercheck.domain.model.enums import MemberKind
from membercheck.domain.predicates.member_predicates import is_overridable
from tests.factories import make_member


def make_expectation() -> Expectation:
    """Create the overridable Expectation for tests."""
    return Expectation(
        predicate=is_overridable(),
        expected="to be overridable",
        actual="not overridable",
    )


class TestEvaluate:
    """Tests for evaluate()."""

    def test_empty_passes(self) -> None:
        result = evaluate((), is_overridable())
        assert result.passed is True
        assert result.checked == 0

    def test_all_pass(self) -> None:
        members = (make_member(name="a"), make_member(name="b"))
        result = evaluate(members, is_overridable())
        assert result.passed is True
        assert result.checked == 2

    def test_collects_every_failure_in_order(self) -> None:
        members = (
            make_member(name="zulu", is_overridable=False),
            make_member(name="alpha", is_overridable=True),
            make_member(name="mike", is_overridable=False),
            make_member(name="bravo", is_overridable=False),
        )
        result = evaluate(members, is_overridable())
        assert [m.name for m in result.failing] == ["zulu", "mike", "bravo"]
        assert result.checked == 4

    def test_accepts_generator(self) -> None:
        members = (make_member(name=n, is_overridable=False) for n in ("a", "b"))
        result = evaluate(members, is_overridable())
        assert result.failing_count == 2

    def test_idempotent(self) -> None:
        members = (make_member(name="a", is_overridable=False), make_member(name="b"))
        assert evaluate(members, is_overridable()) == evaluate(members, is_overridable())


class TestVerify:
    """Tests for verify()."""

    def test_pass_returns_result(self) -> None:
        result = verify((make_member(),), MemberKind.PROPERTY, make_expectation())
        assert result.passed is True

    def test_failure_raises_with_result(self) -> None:
        members = (make_member(name="total", declaring_type="m.Order", is_overridable=False),)
        with pytest.raises(MemberAssertionError) as exc_info:
            verify(members, MemberKind.PROPERTY, make_expectation())
        assert exc_info.value.result.failing == members
        assert str(exc_info.value) == (
            "Expected all selected properties to be overridable, "
            "but the following properties are not overridable:\n"
            "str m.Order.total"
        )

    def test_reason_injected(self) -> None:
        members = (make_member(is_overridable=False),)
        expected = "because we want to test the error message,"
        with pytest.raises(MemberAssertionError, match=expected):
            verify(
                members,
                MemberKind.PROPERTY,
                make_expectation(),
                "we want to test the error {0}",
                "message",
            )

    def test_bad_reason_fails_even_when_passing(self) -> None:
        with pytest.raises(ReasonFormatError):
            verify((make_member(),), MemberKind.PROPERTY, make_expectation(), "{0}")


class TestExpectationFailFirst:
    """Tests for FAIL-FIRST validation in Expectation."""

    def test_non_callable_predicate_raises(self) -> None:
        with pytest.raises(TypeError, match="predicate must be callable"):
            Expectation(predicate=None, expected="x", actual="y")  # type: ignore[arg-type]

    def test_empty_expected_raises(self) -> None:
        with pytest.raises(ValueError, match="expected must not be empty"):
            Expectation(predicate=is_overridable(), expected="", actual="y")

    def test_empty_actual_raises(self) -> None:
        with pytest.raises(ValueError, match="actual must not be empty"):
            Expectation(predicate=is_overridable(), expected="x", actual="")
