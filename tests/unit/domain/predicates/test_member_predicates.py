"""Tests for domain/predicates/member_predicates.py."""

import pytest

from membercheck.domain.exceptions import InvalidMarkerError
from membercheck.domain.model.enums import MemberKind, Visibility
from membercheck.domain.model.marker import Marker
from membercheck.domain.model.member import MemberDescriptor
from membercheck.domain.predicates.member_predicates import (
    has_name_matching,
    has_visibility,
    is_decorated_with,
    is_of_type,
    is_overridable,
)
from tests.factories import make_member


class Audited(Marker):
    pass


class TestIsOverridable:
    """Tests for is_overridable predicate."""

    def test_overridable(self) -> None:
        assert is_overridable()(make_member(is_overridable=True)) is True

    def test_final(self) -> None:
        assert is_overridable()(make_member(is_overridable=False)) is False


class TestIsDecoratedWith:
    """Tests for is_decorated_with predicate."""

    def test_marked(self) -> None:
        pred = is_decorated_with(Audited)
        assert pred(make_member(markers=(Audited(),))) is True

    def test_unmarked(self) -> None:
        pred = is_decorated_with(Audited)
        assert pred(make_member()) is False

    def test_ignores_visibility(self) -> None:
        pred = is_decorated_with(Audited)
        member = make_member(visibility=Visibility.PROTECTED, markers=(Audited(),))
        assert pred(member) is True

    def test_marker_instance_rejected(self) -> None:
        with pytest.raises(InvalidMarkerError, match="got Audited"):
            is_decorated_with(Audited())  # type: ignore[arg-type]

    def test_non_marker_class_rejected(self) -> None:
        with pytest.raises(InvalidMarkerError, match="got str"):
            is_decorated_with(str)  # type: ignore[arg-type]


class TestHasVisibility:
    """Tests for has_visibility predicate."""

    def test_match(self) -> None:
        pred = has_visibility(Visibility.PUBLIC, Visibility.INTERNAL)
        assert pred(make_member(visibility=Visibility.INTERNAL)) is True

    def test_no_match(self) -> None:
        pred = has_visibility(Visibility.PUBLIC)
        assert pred(make_member(visibility=Visibility.PROTECTED)) is False

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one visibility required"):
            has_visibility()


class TestIsOfType:
    """Tests for is_of_type predicate."""

    def test_display_name(self) -> None:
        assert is_of_type("str")(make_member(declared_type="str")) is True
        assert is_of_type("int")(make_member(declared_type="str")) is False

    def test_annotation_object(self) -> None:
        member = MemberDescriptor(
            name="total",
            declaring_type="m.Order",
            declared_type="int",
            visibility=Visibility.PUBLIC,
            kind=MemberKind.PROPERTY,
            annotation=int,
        )
        assert is_of_type(int)(member) is True
        assert is_of_type(str)(member) is False


class TestHasNameMatching:
    """Tests for has_name_matching predicate."""

    def test_match(self) -> None:
        assert has_name_matching(r"^get_")(make_member(name="get_total")) is True

    def test_no_match(self) -> None:
        assert has_name_matching(r"^get_")(make_member(name="total")) is False

    def test_invalid_regex_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid regex"):
            has_name_matching("[")
