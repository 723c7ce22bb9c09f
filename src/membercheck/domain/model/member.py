"""Member descriptor entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from membercheck.domain.exceptions import InvalidMarkerError
from membercheck.domain.model.enums import MemberKind, Visibility
from membercheck.domain.model.marker import Marker


@dataclass(frozen=True, slots=True)
class MemberDescriptor:
    """One inspected class member (property or method).

    Attributes:
        name: Member name as declared (private names unmangled)
        declaring_type: Fully qualified name of declaring class (module.Class)
        declared_type: Display name of value/return type (e.g. "str")
        visibility: PUBLIC/INTERNAL/PROTECTED/PRIVATE
        kind: PROPERTY or METHOD
        is_overridable: Subclasses may redefine the member (not @final)
        markers: Attached marker instances
        annotation: Resolved annotation object behind declared_type
    """

    name: str
    declaring_type: str
    declared_type: str
    visibility: Visibility
    kind: MemberKind
    is_overridable: bool = True
    markers: tuple[Marker, ...] = ()
    annotation: object = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")
        if not self.declaring_type:
            raise ValueError("declaring_type must not be empty")
        if not self.declared_type:
            raise ValueError("declared_type must not be empty")
        for marker in self.markers:
            if not isinstance(marker, Marker):
                raise InvalidMarkerError(marker)

    def has_marker(self, kind: type[Marker]) -> bool:
        """Check if member carries a marker of given kind (subclasses count)."""
        return any(isinstance(m, kind) for m in self.markers)

    @property
    def qualified_name(self) -> str:
        """Declaring type and member name: module.Class.member."""
        return f"{self.declaring_type}.{self.name}"

    @property
    def signature(self) -> str:
        """Declared type followed by qualified name, as listed in failures."""
        return f"{self.declared_type} {self.qualified_name}"

    def __str__(self) -> str:
        return self.signature
