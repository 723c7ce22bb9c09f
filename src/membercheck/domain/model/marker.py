"""Marker annotations attached to class members."""

from __future__ import annotations

from typing import TypeVar

from membercheck.domain.model.accessor import MARKERS_ATTR, accessor_of

T = TypeVar("T")


class Marker:
    """Base class for member markers.

    Subclass to declare a marker kind, apply an instance as decorator:

        class Audited(Marker):
            pass

        class Order:
            @Audited()
            @property
            def total(self) -> int: ...

    Works above or below @property, and on methods, staticmethods,
    classmethods and classes. The decorated object is returned unchanged.
    """

    def __call__(self, target: T) -> T:
        """Attach this marker to target and return target."""
        holder = accessor_of(target)
        existing = getattr(holder, MARKERS_ATTR, ())
        setattr(holder, MARKERS_ATTR, (*existing, self))
        return target

    @classmethod
    def qualified_name(cls) -> str:
        """Fully qualified name of the marker kind (module.Class)."""
        return f"{cls.__module__}.{cls.__qualname__}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def markers_of(target: object) -> tuple[Marker, ...]:
    """Read markers attached to target.

    Args:
        target: Class attribute value or class

    Returns:
        Attached markers in application order (innermost first)
    """
    try:
        holder = accessor_of(target)
    except TypeError:
        return ()
    return tuple(getattr(holder, MARKERS_ATTR, ()))
