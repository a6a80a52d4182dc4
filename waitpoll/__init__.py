"""waitpoll: wait for a polled condition with timeout and cancellation.

    >>> await wait_polled_condition(lambda: server.ready, interval_ms=100, timeout_ms=5000)
"""

from .adapters.cancellation import CancellationToken
from .adapters.reporting import LoggingReporter
from .core import (
    CancellationPort,
    Multiple,
    PollAbortedError,
    PollError,
    PollOptions,
    PollOutcome,
    PollReporterPort,
    PollResult,
    PollScheduler,
    PollTimeoutError,
    Single,
    is_condition_met,
)
from .polling import create_scheduler, wait_polled_condition

__all__ = [
    "CancellationPort",
    "CancellationToken",
    "LoggingReporter",
    "Multiple",
    "PollAbortedError",
    "PollError",
    "PollOptions",
    "PollOutcome",
    "PollReporterPort",
    "PollResult",
    "PollScheduler",
    "PollTimeoutError",
    "Single",
    "create_scheduler",
    "is_condition_met",
    "wait_polled_condition",
]
