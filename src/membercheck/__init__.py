"""membercheck - fluent assertions about the members of Python classes."""

__version__ = "0.1.0"

from membercheck.domain.exceptions import (
    MemberAssertionError,
    MemberCheckError,
    ReasonFormatError,
    UnresolvableTypeError,
)
from membercheck.domain.model.enums import MemberKind, Visibility
from membercheck.domain.model.marker import Marker
from membercheck.presentation.api.dsl import MemberCheck, methods, properties
from membercheck.presentation.api.visibility import internal, private, protected, public

__all__ = [
    "Marker",
    "MemberAssertionError",
    "MemberCheck",
    "MemberCheckError",
    "MemberKind",
    "ReasonFormatError",
    "UnresolvableTypeError",
    "Visibility",
    "__version__",
    "internal",
    "methods",
    "private",
    "properties",
    "protected",
    "public",
]
