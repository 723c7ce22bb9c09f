"""Domain predicates."""

from membercheck.domain.predicates.base import MemberPredicate
from membercheck.domain.predicates.member_predicates import (
    has_name_matching,
    has_visibility,
    is_decorated_with,
    is_of_type,
    is_overridable,
)

__all__ = [
    # Type aliases
    "MemberPredicate",
    # Member predicates
    "has_name_matching",
    "has_visibility",
    "is_decorated_with",
    "is_of_type",
    "is_overridable",
]
