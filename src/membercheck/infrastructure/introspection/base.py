"""Base utilities for runtime introspection."""

from __future__ import annotations

import inspect
import typing
from typing import Any

from membercheck.domain.exceptions import UnresolvableTypeError
from membercheck.domain.model.accessor import VISIBILITY_ATTR, accessor_of, accessors_of
from membercheck.domain.model.enums import Visibility


def resolve_type(cls: object) -> type:
    """Ensure selection target is a class.

    Args:
        cls: Candidate selection target

    Returns:
        cls, typed as class

    Raises:
        UnresolvableTypeError: If cls is None or not a class (FAIL-FIRST)
    """
    if not isinstance(cls, type):
        raise UnresolvableTypeError(cls)
    return cls


def qualified_name(cls: type) -> str:
    """Fully qualified class name (module.Qualname)."""
    return f"{cls.__module__}.{cls.__qualname__}"


def get_visibility(name: str) -> Visibility:
    """Determine visibility from Python naming convention.

    Args:
        name: Identifier name (unmangled)

    Returns:
        Visibility based on underscore prefix

    Rules:
        __name__ (dunder) → PUBLIC (special methods)
        __name (not __name__) → PRIVATE (mangled)
        _name → PROTECTED
        name → PUBLIC
    """
    # Dunder methods (__init__, __str__, etc.) are PUBLIC
    if name.startswith("__") and name.endswith("__"):
        return Visibility.PUBLIC
    # Name-mangled private attributes
    if name.startswith("__"):
        return Visibility.PRIVATE
    # Protected by convention
    if name.startswith("_"):
        return Visibility.PROTECTED
    return Visibility.PUBLIC


def declared_visibility(name: str, value: object) -> Visibility:
    """Visibility of a member: explicit override, else naming convention.

    Args:
        name: Unmangled member name
        value: Class attribute value

    Returns:
        Visibility set by @public/@internal/@protected/@private, or by convention
    """
    try:
        holder = accessor_of(value)
    except TypeError:
        return get_visibility(name)
    override = getattr(holder, VISIBILITY_ATTR, None)
    if isinstance(override, Visibility):
        return override
    return get_visibility(name)


def unmangle(owner: type, name: str) -> str:
    """Undo private name mangling (_Owner__x → __x).

    Args:
        owner: Class whose namespace holds name
        name: Name as stored in owner.__dict__

    Returns:
        Declared name
    """
    prefix = f"_{owner.__name__.lstrip('_')}__"
    if name.startswith(prefix) and not name.endswith("__"):
        return "__" + name[len(prefix) :]
    return name


def is_final(owner: type, value: object) -> bool:
    """Check if member is sealed with typing.final.

    A member is final when any backing function is @final,
    or the declaring class itself is @final.

    Args:
        owner: Declaring class
        value: Class attribute value

    Returns:
        True if subclasses must not redefine the member
    """
    if vars(owner).get("__final__", False) is True:
        return True
    return any(getattr(f, "__final__", False) is True for f in accessors_of(value))


def type_display_name(annotation: object) -> str:
    """Format annotation for failure messages.

    Args:
        annotation: Resolved annotation, raw string, or inspect.Signature.empty

    Returns:
        Short display name: "str", "None", "list[int]", "Any"
    """
    if annotation is inspect.Signature.empty:
        return "Any"
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type) and not typing.get_args(annotation):
        return annotation.__qualname__
    return str(annotation).removeprefix("typing.")


def return_annotation(func: object) -> Any:
    """Resolve return annotation of func.

    Forward references are resolved against func's globals.
    Unresolvable references fall back to the raw annotation.

    Args:
        func: Getter or method function

    Returns:
        Resolved annotation, raw annotation, or inspect.Signature.empty
    """
    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError):
        raw = inspect.get_annotations(func) if callable(func) else {}
        return raw.get("return", inspect.Signature.empty)
    return hints.get("return", inspect.Signature.empty)


def declaring_classes(cls: type, *, include_inherited: bool) -> tuple[type, ...]:
    """Classes whose namespaces contribute members, most derived first.

    Args:
        cls: Selected class
        include_inherited: Walk the MRO (object excluded)

    Returns:
        Classes in lookup order
    """
    if not include_inherited:
        return (cls,)
    return tuple(c for c in cls.__mro__ if c is not object)
