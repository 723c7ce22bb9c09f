"""Reporters for assertion results."""

from membercheck.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = ["ConsoleConfig", "ConsoleReporter"]
