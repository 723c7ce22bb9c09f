"""Type introspector port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from membercheck.domain.model.enums import MemberKind
    from membercheck.domain.model.member import MemberDescriptor


class TypeIntrospector(Protocol):
    """Lists the members of one kind declared by a class.

    Implementations must:
    - return members in declaration order (no re-sorting)
    - include every visibility, PRIVATE too (filtering is the selector's job)
    - create fresh descriptors per call (no caching)
    """

    @property
    def kind(self) -> MemberKind:
        """Kind of member this introspector lists."""
        ...

    def members(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """List members of cls.

        Args:
            cls: Class to inspect

        Returns:
            Member descriptors in declaration order
        """
        ...
