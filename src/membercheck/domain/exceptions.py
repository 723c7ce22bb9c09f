"""Domain exceptions: all public errors of membercheck.

All exceptions visible to users are defined in the domain layer.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from membercheck.domain.model.assertion_result import AssertionResult


class MemberCheckError(Exception):
    """Base for all membercheck error exceptions.

    Allows: except MemberCheckError to catch all library errors.
    """


class UnresolvableTypeError(MemberCheckError, TypeError):
    """Selection target is not a class.

    Raised when a selector is created for None or for a non-type object.
    Inherits TypeError for semantic correctness (expected a class, got X).

    Attributes:
        got: Object received instead of a class.
    """

    def __init__(self, got: object) -> None:
        """Initialize with the unresolvable object."""
        self.got = got
        super().__init__(f"expected a class to select members from, got {type(got).__name__}")


class MemberAssertionError(MemberCheckError, AssertionError):
    """One or more selected members failed an assertion.

    Inherits AssertionError so test runners report it as a test failure,
    not as an error in the test itself.

    Attributes:
        result: Evaluation result holding every failing member.
    """

    def __init__(self, message: str, result: AssertionResult) -> None:
        """Initialize with composed failure message and result."""
        if result.passed:
            raise ValueError("MemberAssertionError requires at least one failing member")
        self.result = result
        super().__init__(message)


class ReasonFormatError(MemberCheckError, ValueError):
    """Reason template could not be formatted.

    Raised when a placeholder references an argument that was not supplied,
    or the template itself is malformed.

    Attributes:
        template: Template that failed.
        reason: Error description.
    """

    def __init__(self, template: str, reason: str) -> None:
        """Initialize with template and reason."""
        self.template = template
        self.reason = reason
        super().__init__(f"cannot format reason {template!r}: {reason}")


class InvalidMarkerError(MemberCheckError, TypeError):
    """Marker kind must be a Marker subclass.

    Attributes:
        got: Object received instead of a Marker subclass.
    """

    def __init__(self, got: object) -> None:
        """Initialize with the invalid marker kind."""
        self.got = got
        name = got.__name__ if isinstance(got, type) else type(got).__name__
        super().__init__(f"marker kind must be a Marker subclass, got {name}")


class EmptyVisibilityFilterError(MemberCheckError, ValueError):
    """Visibility filter must allow at least one visibility."""

    def __init__(self) -> None:
        """Initialize with fixed message."""
        super().__init__("visibility filter must allow at least one visibility")
