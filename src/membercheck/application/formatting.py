"""Failure message formatting.

Positional reason templates use str.format semantics:
{0}, {1}, ... reference because_args; {{ and }} are literal braces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from membercheck.domain.exceptions import ReasonFormatError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from membercheck.domain.model.enums import MemberKind
    from membercheck.domain.model.member import MemberDescriptor

BECAUSE = "because"


def format_reason(template: str, *args: object) -> str:
    """Substitute positional arguments into reason template.

    Args:
        template: Reason with {0}-style placeholders
        *args: Values for placeholders

    Returns:
        Formatted reason

    Raises:
        ReasonFormatError: If a placeholder has no argument, or uses a
            named field, or the template is malformed (FAIL-FIRST)
    """
    try:
        return template.format(*args)
    except IndexError as e:
        raise ReasonFormatError(template, f"placeholder references missing argument ({e})") from e
    except KeyError as e:
        raise ReasonFormatError(template, f"named placeholder {e} not supported") from e
    except ValueError as e:
        raise ReasonFormatError(template, str(e)) from e


def because_clause(reason: str) -> str:
    """Build the " because ..." clause of a failure message.

    Args:
        reason: Formatted reason, with or without leading "because"

    Returns:
        " because <reason>", or "" for blank reason
    """
    stripped = reason.strip()
    if not stripped:
        return ""
    if stripped == BECAUSE or stripped.startswith(BECAUSE + " "):
        return f" {stripped}"
    return f" {BECAUSE} {stripped}"


def format_failure(
    kind: MemberKind,
    expected: str,
    actual: str,
    reason: str,
    failing: Iterable[MemberDescriptor],
) -> str:
    """Compose aggregated failure message.

    Shape:
        Expected all selected <kind> <expected>[ because <reason>],
        but the following <kind> are <actual>:
        <signature>
        ...

    Args:
        kind: Member kind (plural noun in message)
        expected: Verb phrase, e.g. "to be overridable"
        actual: Phrase for failing members, e.g. "not overridable"
        reason: Formatted reason (may be empty)
        failing: Failing members, in selector order

    Returns:
        Message with one signature per line, no trailing newline
    """
    header = (
        f"Expected all selected {kind.plural} {expected}{because_clause(reason)}, "
        f"but the following {kind.plural} are {actual}:"
    )
    return "\n".join([header, *(m.signature for m in failing)])
