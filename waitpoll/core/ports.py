"""Port interfaces for the waitpoll polling utility.

These abstract base classes define the boundaries between the core
scheduling logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Cancellation** (external systems signal into core)
   - CancellationPort: Pollable "has fired" flag plus fire notification

2. **Reporting** (core calls out to adapters)
   - PollReporterPort: Observability side channel for checks and failures
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeAlias

from .models import PollResult

Subscription: TypeAlias = Any


class CancellationPort(ABC):
    """Port for an external, edge-triggered cancellation signal.

    The signal transitions from not-fired to fired at most once. The
    scheduler reads `fired` at its observation points and subscribes to
    be woken from an armed timer.
    """

    @property
    @abstractmethod
    def fired(self) -> bool:
        """Whether the signal has fired."""

    @abstractmethod
    def subscribe(self, callback: Callable[[], None]) -> Subscription:
        """Register a callback invoked once when the signal fires.

        Args:
            callback: Nullary callable. Invoked immediately if the signal
                has already fired.

        Returns:
            Opaque handle to pass to unsubscribe().
        """

    @abstractmethod
    def unsubscribe(self, subscription: Subscription) -> None:
        """Release a subscription.

        Must be safe to call more than once and after the signal fired.
        """


class PollReporterPort(ABC):
    """Port for reporting poll activity.

    Adapters decide where the reports go (logging, metrics, test
    capture). Implementations must not raise.
    """

    @abstractmethod
    def evaluation_failed(self, error: BaseException, attempt: int) -> None:
        """Report an evaluation pass that raised.

        Args:
            error: The exception raised by the condition.
            attempt: 1-based pass number.
        """

    @abstractmethod
    def check_completed(self, attempt: int, verdict: bool) -> None:
        """Report the verdict of an evaluation pass."""

    @abstractmethod
    def poll_settled(self, result: PollResult) -> None:
        """Report the terminal outcome of a poll operation."""
