"""Assertion evaluation result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from membercheck.domain.model.member import MemberDescriptor


@dataclass(frozen=True, slots=True)
class AssertionResult:
    """Outcome of applying one predicate to a member sequence.

    Attributes:
        failing: Members that failed, in selector order
        checked: Number of members evaluated
    """

    failing: tuple[MemberDescriptor, ...] = ()
    checked: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.checked < len(self.failing):
            raise ValueError(
                f"checked ({self.checked}) must be >= failing count ({len(self.failing)})"
            )

    @property
    def passed(self) -> bool:
        """True if no member failed."""
        return not self.failing

    @property
    def failing_count(self) -> int:
        """Number of failing members."""
        return len(self.failing)
