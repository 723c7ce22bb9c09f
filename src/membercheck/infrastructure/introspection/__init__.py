"""Runtime introspection of class members."""

from membercheck.infrastructure.introspection.base import (
    get_visibility,
    qualified_name,
    resolve_type,
    type_display_name,
)
from membercheck.infrastructure.introspection.reflection import (
    MethodIntrospector,
    PropertyIntrospector,
    ReflectionIntrospector,
)

__all__ = [
    "MethodIntrospector",
    "PropertyIntrospector",
    "ReflectionIntrospector",
    "get_visibility",
    "qualified_name",
    "resolve_type",
    "type_display_name",
]
