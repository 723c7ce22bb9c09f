"""Visibility filter value object."""

from __future__ import annotations

from dataclasses import dataclass

from membercheck.domain.exceptions import EmptyVisibilityFilterError
from membercheck.domain.model.enums import Visibility


@dataclass(frozen=True, slots=True)
class VisibilityFilter:
    """Set of visibilities a selector admits.

    Attributes:
        allowed: Admitted visibilities (non-empty)
    """

    allowed: frozenset[Visibility]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.allowed:
            raise EmptyVisibilityFilterError

    @classmethod
    def of(cls, *visibilities: Visibility) -> VisibilityFilter:
        """Create filter admitting exactly the given visibilities."""
        for visibility in visibilities:
            if not isinstance(visibility, Visibility):
                raise TypeError(f"expected Visibility, got {type(visibility).__name__}")
        return cls(allowed=frozenset(visibilities))

    @classmethod
    def default(cls) -> VisibilityFilter:
        """Everything except PRIVATE."""
        return cls.of(Visibility.PUBLIC, Visibility.INTERNAL, Visibility.PROTECTED)

    @classmethod
    def public_or_internal(cls) -> VisibilityFilter:
        """PUBLIC and INTERNAL only."""
        return cls.of(Visibility.PUBLIC, Visibility.INTERNAL)

    def allows(self, visibility: Visibility) -> bool:
        """Check if visibility passes the filter."""
        return visibility in self.allowed

    def narrow(self, other: VisibilityFilter) -> VisibilityFilter:
        """Intersect with another filter.

        Raises:
            EmptyVisibilityFilterError: If filters share no visibility
        """
        return VisibilityFilter(allowed=self.allowed & other.allowed)
