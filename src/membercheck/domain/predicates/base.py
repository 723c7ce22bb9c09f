"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from membercheck.domain.model.member import MemberDescriptor

# Type alias for predicate functions
MemberPredicate = Callable[["MemberDescriptor"], bool]
