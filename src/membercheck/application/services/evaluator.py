"""Assertion evaluation over selected members."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from membercheck.application.formatting import format_failure, format_reason
from membercheck.domain.exceptions import MemberAssertionError
from membercheck.domain.model.assertion_result import AssertionResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from membercheck.domain.model.enums import MemberKind
    from membercheck.domain.model.member import MemberDescriptor
    from membercheck.domain.predicates.base import MemberPredicate


@dataclass(frozen=True, slots=True)
class Expectation:
    """What an assertion expects, in message wording.

    Attributes:
        predicate: Check every selected member must pass
        expected: Verb phrase, e.g. "to be overridable"
        actual: Phrase describing failing members, e.g. "not overridable"
    """

    predicate: MemberPredicate
    expected: str
    actual: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.predicate):
            raise TypeError("predicate must be callable")
        if not self.expected:
            raise ValueError("expected must not be empty")
        if not self.actual:
            raise ValueError("actual must not be empty")


def evaluate(members: Iterable[MemberDescriptor], predicate: MemberPredicate) -> AssertionResult:
    """Apply predicate to every member.

    Args:
        members: Members in selector order
        predicate: Check to apply

    Returns:
        Result with all failing members, order preserved

    Complexity: O(N) where N=members
    """
    checked = 0
    failing: list[MemberDescriptor] = []
    for member in members:
        checked += 1
        if not predicate(member):
            failing.append(member)
    return AssertionResult(failing=tuple(failing), checked=checked)


def verify(
    members: Iterable[MemberDescriptor],
    kind: MemberKind,
    expectation: Expectation,
    because: str = "",
    *because_args: object,
) -> AssertionResult:
    """Evaluate expectation and raise on any failing member.

    Reason is formatted before evaluation, so a broken template
    fails even when every member passes.

    Args:
        members: Members in selector order
        kind: Member kind (for message wording)
        expectation: Predicate and message phrases
        because: Reason template with {0}-style placeholders
        *because_args: Placeholder values

    Returns:
        Passing result

    Raises:
        ReasonFormatError: If reason template cannot be formatted
        MemberAssertionError: If any member fails (all failures reported)
    """
    reason = format_reason(because, *because_args)
    result = evaluate(members, expectation.predicate)
    if not result.passed:
        message = format_failure(
            kind, expectation.expected, expectation.actual, reason, result.failing
        )
        raise MemberAssertionError(message, result)
    return result
