"""Explicit visibility declarations.

Python has no access modifiers, so visibility comes from naming
convention. These decorators override it per member; INTERNAL is
only reachable this way:

    class Account:
        @internal
        @property
        def ledger_id(self) -> str: ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from membercheck.domain.model.accessor import VISIBILITY_ATTR, accessor_of
from membercheck.domain.model.enums import Visibility

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def visibility(level: Visibility) -> Callable[[T], T]:
    """Create decorator declaring member visibility.

    Args:
        level: Declared visibility

    Returns:
        Decorator storing level on the member's accessor

    Raises:
        TypeError: If level is not a Visibility
    """
    if not isinstance(level, Visibility):
        raise TypeError(f"expected Visibility, got {type(level).__name__}")

    def decorator(target: T) -> T:
        setattr(accessor_of(target), VISIBILITY_ATTR, level)
        return target

    return decorator


public = visibility(Visibility.PUBLIC)
internal = visibility(Visibility.INTERNAL)
protected = visibility(Visibility.PROTECTED)
private = visibility(Visibility.PRIVATE)
