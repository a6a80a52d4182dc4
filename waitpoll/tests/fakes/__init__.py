"""Fake implementations of core ports for testing.

- FakeCancellation: Manually fired cancellation handle with subscription tracking
- FakeReporter: Captured reports for assertion
- ScriptedCondition: Evaluator returning a scripted sequence of results
"""

from .cancellation import FakeCancellation
from .condition import ScriptedCondition
from .reporter import FakeReporter

__all__ = [
    "FakeCancellation",
    "FakeReporter",
    "ScriptedCondition",
]
