"""Domain model entities."""

from membercheck.domain.model.assertion_result import AssertionResult
from membercheck.domain.model.configuration import SelectionConfig
from membercheck.domain.model.enums import MemberKind, Visibility
from membercheck.domain.model.marker import Marker, markers_of
from membercheck.domain.model.member import MemberDescriptor
from membercheck.domain.model.visibility_filter import VisibilityFilter

__all__ = [
    # Enums
    "MemberKind",
    "Visibility",
    # Value objects
    "Marker",
    "SelectionConfig",
    "VisibilityFilter",
    # Entities
    "AssertionResult",
    "MemberDescriptor",
    # Helpers
    "markers_of",
]
