"""Application services."""

from membercheck.application.services.evaluator import Expectation, evaluate, verify

__all__ = ["Expectation", "evaluate", "verify"]
