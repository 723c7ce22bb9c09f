"""Member predicates."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from membercheck.domain.model.member import MemberDescriptor

from membercheck.domain.exceptions import InvalidMarkerError
from membercheck.domain.model.enums import Visibility
from membercheck.domain.model.marker import Marker
from membercheck.domain.predicates.base import MemberPredicate


def is_overridable() -> MemberPredicate:
    """Create predicate: member can be redefined by a subclass.

    Returns:
        Predicate function
    """

    def predicate(member: MemberDescriptor) -> bool:
        return member.is_overridable

    return predicate


def is_decorated_with(marker: type[Marker]) -> MemberPredicate:
    """Create predicate: member carries marker of given kind.

    Args:
        marker: Marker subclass

    Returns:
        Predicate function

    Raises:
        InvalidMarkerError: If marker is not a Marker subclass
    """
    if not (isinstance(marker, type) and issubclass(marker, Marker)):
        raise InvalidMarkerError(marker)

    def predicate(member: MemberDescriptor) -> bool:
        return member.has_marker(marker)

    return predicate


def has_visibility(*visibilities: Visibility) -> MemberPredicate:
    """Create predicate: member visibility is one of given.

    Args:
        *visibilities: Accepted visibilities (at least one required)

    Returns:
        Predicate function

    Raises:
        ValueError: If no visibilities provided
    """
    if not visibilities:
        raise ValueError("at least one visibility required")
    accepted = frozenset(visibilities)

    def predicate(member: MemberDescriptor) -> bool:
        return member.visibility in accepted

    return predicate


def is_of_type(declared: object) -> MemberPredicate:
    """Create predicate: member value/return type is declared.

    Args:
        declared: Annotation object (e.g. str) or display name (e.g. "str")

    Returns:
        Predicate function
    """

    def predicate(member: MemberDescriptor) -> bool:
        if isinstance(declared, str):
            return member.declared_type == declared
        return member.annotation == declared

    return predicate


def has_name_matching(regex: str) -> MemberPredicate:
    """Create predicate: member name matches regex.

    Args:
        regex: Regular expression pattern

    Returns:
        Predicate function

    Raises:
        ValueError: If regex is invalid
    """
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise ValueError(f"Invalid regex '{regex}': {e}") from e

    def predicate(member: MemberDescriptor) -> bool:
        return compiled.search(member.name) is not None

    return predicate
