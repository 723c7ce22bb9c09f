"""Fluent API for member assertions.

Public exports:
    MemberCheck: Entry point for fluent DSL
    properties/methods: Shortcut selector factories
    PropertySelector/MethodSelector: Member selectors
    MemberAssertions: Assertion builder
    public/internal/protected/private: Visibility declarations
"""

from membercheck.presentation.api.dsl import (
    MemberAssertions,
    MemberCheck,
    MemberSelector,
    MethodSelector,
    PropertySelector,
    methods,
    properties,
)
from membercheck.presentation.api.visibility import (
    internal,
    private,
    protected,
    public,
    visibility,
)

__all__ = [
    "MemberAssertions",
    "MemberCheck",
    "MemberSelector",
    "MethodSelector",
    "PropertySelector",
    "internal",
    "methods",
    "private",
    "properties",
    "protected",
    "public",
    "visibility",
]
