"""Runtime introspectors for class members.

Implement TypeIntrospector using vars() of each class in the MRO.
Namespace dicts preserve definition order, so members come back in
declaration order: the selected class first, then its bases.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from membercheck.domain.model.accessor import accessor_of
from membercheck.domain.model.enums import MemberKind
from membercheck.domain.model.marker import markers_of
from membercheck.domain.model.member import MemberDescriptor
from membercheck.infrastructure.introspection.base import (
    declared_visibility,
    declaring_classes,
    is_final,
    qualified_name,
    resolve_type,
    return_annotation,
    type_display_name,
    unmangle,
)

if TYPE_CHECKING:
    from membercheck.domain.model.configuration import SelectionConfig


class ReflectionIntrospector(ABC):
    """Base for vars()-based introspectors.

    Subclasses decide which namespace entries are members of their kind
    and which function carries the declared type.
    """

    kind: MemberKind

    def __init__(self, *, include_inherited: bool = True) -> None:
        """Initialize introspector.

        Args:
            include_inherited: Also list members declared on base classes
        """
        self._include_inherited = include_inherited

    @classmethod
    def from_config(cls, config: SelectionConfig) -> ReflectionIntrospector:
        """Create introspector from selection config."""
        return cls(include_inherited=config.include_inherited)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReflectionIntrospector) or type(other) is not type(self):
            return NotImplemented
        return self._include_inherited == other._include_inherited

    def __hash__(self) -> int:
        return hash((type(self), self._include_inherited))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(include_inherited={self._include_inherited})"

    @abstractmethod
    def _accepts(self, name: str, value: object) -> bool:
        """Check if namespace entry is a member of this kind."""
        ...

    @abstractmethod
    def _typed_function(self, value: object) -> object | None:
        """Function whose return annotation is the member's declared type."""
        ...

    def members(self, cls: type) -> tuple[MemberDescriptor, ...]:
        """List members of cls in declaration order.

        Args:
            cls: Class to inspect

        Returns:
            Fresh descriptors, all visibilities included

        Raises:
            UnresolvableTypeError: If cls is not a class
        """
        target = resolve_type(cls)
        seen: set[str] = set()
        result: list[MemberDescriptor] = []

        for owner in declaring_classes(target, include_inherited=self._include_inherited):
            namespace = vars(owner)
            for stored_name, value in namespace.items():
                if stored_name in seen or not self._accepts(stored_name, value):
                    continue
                result.append(self._describe(owner, stored_name, value))
            # Names shadow base members even when not of this kind
            seen.update(namespace)

        return tuple(result)

    def _describe(self, owner: type, stored_name: str, value: object) -> MemberDescriptor:
        name = unmangle(owner, stored_name)
        func = self._typed_function(value)
        annotation = return_annotation(func) if func is not None else inspect.Signature.empty
        return MemberDescriptor(
            name=name,
            declaring_type=qualified_name(owner),
            declared_type=type_display_name(annotation),
            visibility=declared_visibility(name, value),
            kind=self.kind,
            is_overridable=not is_final(owner, value),
            markers=markers_of(value),
            annotation=None if annotation is inspect.Signature.empty else annotation,
        )


class PropertyIntrospector(ReflectionIntrospector):
    """Lists property members."""

    kind = MemberKind.PROPERTY

    def _accepts(self, name: str, value: object) -> bool:
        return isinstance(value, property)

    def _typed_function(self, value: object) -> object | None:
        return getattr(value, "fget", None)


class MethodIntrospector(ReflectionIntrospector):
    """Lists plain, static and class methods.

    Special (dunder) methods are not selected.
    """

    kind = MemberKind.METHOD

    def _accepts(self, name: str, value: object) -> bool:
        if name.startswith("__") and name.endswith("__"):
            return False
        return inspect.isfunction(value) or isinstance(value, (staticmethod, classmethod))

    def _typed_function(self, value: object) -> object | None:
        return accessor_of(value)
