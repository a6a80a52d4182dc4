"""Core domain logic for the waitpoll polling utility.

This package depends only on the standard library and holds the
condition evaluator, the polling scheduler and the ports they use.
Concrete cancellation handles and reporters live in the adapters
package.
"""

from .evaluator import is_condition_met
from .models import (
    Condition,
    Evaluator,
    Multiple,
    PollAbortedError,
    PollError,
    PollOptions,
    PollOutcome,
    PollResult,
    PollTimeoutError,
    Single,
    as_condition,
)
from .ports import CancellationPort, PollReporterPort
from .scheduler import PollOperation, PollScheduler

__all__ = [
    "CancellationPort",
    "Condition",
    "Evaluator",
    "Multiple",
    "PollAbortedError",
    "PollError",
    "PollOperation",
    "PollOptions",
    "PollOutcome",
    "PollReporterPort",
    "PollResult",
    "PollScheduler",
    "PollTimeoutError",
    "Single",
    "as_condition",
    "is_condition_met",
]
