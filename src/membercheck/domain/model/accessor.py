"""Accessor resolution for decorated class members.

Markers and visibility overrides are stored on the underlying function
(property getter, staticmethod/classmethod target) because property,
staticmethod and classmethod objects may not accept new attributes.
"""

from __future__ import annotations

MARKERS_ATTR = "__membercheck_markers__"
VISIBILITY_ATTR = "__membercheck_visibility__"


def accessor_of(target: object) -> object:
    """Return the object that carries member metadata.

    Args:
        target: Function, property, staticmethod, classmethod or class

    Returns:
        Property getter, wrapped function, or target itself

    Raises:
        TypeError: If target is a property without a getter
    """
    if isinstance(target, property):
        if target.fget is None:
            raise TypeError("property without getter cannot carry metadata")
        return target.fget
    if isinstance(target, (staticmethod, classmethod)):
        return target.__func__
    return target


def accessors_of(target: object) -> tuple[object, ...]:
    """Return every function backing a member.

    Properties contribute getter, setter and deleter (when present).

    Args:
        target: Class attribute value

    Returns:
        Backing functions in getter/setter/deleter order
    """
    if isinstance(target, property):
        return tuple(f for f in (target.fget, target.fset, target.fdel) if f is not None)
    if isinstance(target, (staticmethod, classmethod)):
        return (target.__func__,)
    return (target,)
