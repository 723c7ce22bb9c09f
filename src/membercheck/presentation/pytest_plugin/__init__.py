"""pytest plugin for membercheck.

Provides fixtures for member assertions:
    member_config: Selection configuration (override in conftest.py)
    member_check: Factory returning MemberCheck for a class

Configuration (pytest.ini or pyproject.toml):
    membercheck_include_inherited: Select members of base classes (default: true)
    membercheck_report: Summarize member assertion failures at session end (default: false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from membercheck.application.reporters.console import ConsoleReporter
from membercheck.domain.exceptions import MemberAssertionError

# Register fixtures from fixtures module
from membercheck.presentation.pytest_plugin.fixtures import member_check, member_config

if TYPE_CHECKING:
    from collections.abc import Generator

    from membercheck.domain.model.assertion_result import AssertionResult

# Export fixtures for pytest discovery
__all__ = [
    "member_check",
    "member_config",
]

_FAILURES_KEY = pytest.StashKey[list[tuple[str, "AssertionResult"]]]()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "membercheck_include_inherited",
        "select members declared on base classes",
        type="bool",
        default=True,
    )
    parser.addini(
        "membercheck_report",
        "summarize member assertion failures at end of session",
        type="bool",
        default=False,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "membercheck: mark test as class member assertion test",
    )
    config.stash[_FAILURES_KEY] = []


@pytest.hookimpl(wrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item,
    call: pytest.CallInfo[None],
) -> Generator[None, pytest.TestReport, pytest.TestReport]:
    """Record member assertion failures for the terminal summary."""
    report = yield
    error = call.excinfo.value if call.excinfo is not None else None
    if isinstance(error, MemberAssertionError):
        item.config.stash[_FAILURES_KEY].append((item.nodeid, error.result))
    return report


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:
    """Render recorded failures when membercheck_report is enabled."""
    failures = config.stash.get(_FAILURES_KEY, [])
    if not failures or not config.getini("membercheck_report"):
        return

    reporter = ConsoleReporter()
    terminalreporter.section("membercheck")
    for nodeid, result in failures:
        terminalreporter.write(reporter.report(result, title=nodeid))
