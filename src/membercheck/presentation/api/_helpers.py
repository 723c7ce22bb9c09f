"""DRY helpers for DSL selector and assertion classes.

Internal module - not part of public API.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def execute_query(
    source: Iterable[T],
    filters: tuple[Callable[[T], bool], ...],
) -> tuple[T, ...]:
    """Apply filters to source items.

    Args:
        source: Iterable of items to filter
        filters: Predicates to apply (all must pass)

    Returns:
        Tuple of items matching all filters, source order preserved

    Complexity: O(N * F) where N=items, F=filters
    """
    result: Iterable[T] = source
    for predicate in filters:
        result = filter(predicate, result)
    return tuple(result)


def negate(predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    """Invert predicate.

    Args:
        predicate: Predicate to invert

    Returns:
        Predicate returning True where the original returns False
    """

    def inverted(item: T) -> bool:
        return not predicate(item)

    return inverted
