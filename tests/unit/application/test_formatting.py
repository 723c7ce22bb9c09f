"""Tests for application/formatting.py."""

import pytest

from membercheck.application.formatting import because_clause, format_failure, format_reason
from membercheck.domain.exceptions import ReasonFormatError
from membercheck.domain.model.enums import MemberKind
from tests.factories import make_member


class TestFormatReason:
    """Tests for positional reason formatting."""

    def test_positional_substitution(self) -> None:
        assert format_reason("we want to test the error {0}", "message") == (
            "we want to test the error message"
        )

    def test_multiple_positions(self) -> None:
        assert format_reason("{1} before {0}", "b", "a") == "a before b"

    def test_repeated_index(self) -> None:
        assert format_reason("{0} and {0}", "x") == "x and x"

    def test_no_placeholders(self) -> None:
        assert format_reason("plain reason") == "plain reason"

    def test_empty(self) -> None:
        assert format_reason("") == ""

    def test_escaped_braces(self) -> None:
        assert format_reason("{{0}} is {0}", "literal") == "{0} is literal"

    def test_non_string_argument(self) -> None:
        assert format_reason("expected {0} members", 3) == "expected 3 members"

    def test_missing_argument_raises(self) -> None:
        with pytest.raises(ReasonFormatError, match="missing argument"):
            format_reason("{0} and {1}", "only one")

    def test_placeholder_without_arguments_raises(self) -> None:
        with pytest.raises(ReasonFormatError):
            format_reason("error {0}")

    def test_named_placeholder_raises(self) -> None:
        with pytest.raises(ReasonFormatError, match="named placeholder"):
            format_reason("{name}", "x")

    def test_malformed_template_raises(self) -> None:
        with pytest.raises(ReasonFormatError):
            format_reason("unbalanced {", "x")


class TestBecauseClause:
    """Tests for because_clause()."""

    def test_prefixes_because(self) -> None:
        assert because_clause("we want it") == " because we want it"

    def test_existing_because_kept_single(self) -> None:
        assert because_clause("because we want it") == " because we want it"

    def test_blank(self) -> None:
        assert because_clause("") == ""
        assert because_clause("   ") == ""

    def test_word_starting_with_because_is_not_prefix(self) -> None:
        assert because_clause("becauseless") == " because becauseless"

    def test_strips_whitespace(self) -> None:
        assert because_clause("  we want it ") == " because we want it"


class TestFormatFailure:
    """Tests for format_failure()."""

    def test_shape(self) -> None:
        failing = (
            make_member(name="b", declaring_type="m.C"),
            make_member(name="a", declaring_type="m.C"),
        )
        message = format_failure(
            MemberKind.PROPERTY, "to be overridable", "not overridable", "", failing
        )
        assert message == (
            "Expected all selected properties to be overridable, "
            "but the following properties are not overridable:\n"
            "str m.C.b\n"
            "str m.C.a"
        )

    def test_with_reason(self) -> None:
        message = format_failure(
            MemberKind.METHOD,
            "to be overridable",
            "not overridable",
            "they are mocked",
            (make_member(name="run", declaring_type="m.C", declared_type="None"),),
        )
        assert message.startswith(
            "Expected all selected methods to be overridable because they are mocked, "
            "but the following methods are not overridable:\n"
        )
        assert message.endswith("None m.C.run")

    def test_no_trailing_newline(self) -> None:
        message = format_failure(
            MemberKind.PROPERTY, "to be public", "not public", "", (make_member(),)
        )
        assert not message.endswith("\n")
