"""Polling scheduler.

Drives one evaluation pass at a time until the condition is met, the
deadline passes, or the cancellation handle fires:

    Idle -> Checking -> {Checking, Settled}

At most one timer is armed at any moment. A cancellation fire wakes the
armed timer early; an in-flight evaluation pass is never interrupted.
"""

import asyncio
import logging
from collections.abc import Sequence

from .evaluator import is_condition_met
from .models import (
    Condition,
    Evaluator,
    PollAbortedError,
    PollOptions,
    PollOutcome,
    PollResult,
    PollTimeoutError,
    as_condition,
)
from .ports import CancellationPort, PollReporterPort

logger = logging.getLogger(__name__)


class PollOperation:
    """Run state of a single poll invocation.

    Created per call and discarded once settled. Operations never share
    state, so any number may run concurrently on the same loop.
    """

    def __init__(
        self,
        condition: Condition | Evaluator | Sequence[Evaluator],
        options: PollOptions,
        reporter: PollReporterPort,
        cancellation: CancellationPort | None = None,
    ):
        """Initialize a poll operation.

        Args:
            condition: Condition to evaluate on every pass.
            options: Interval, timeout and failure policy.
            reporter: Side channel for failures, checks and settlement.
            cancellation: Optional external cancellation handle.
        """
        self.condition = as_condition(condition)
        self.options = options
        self.reporter = reporter
        self.cancellation = cancellation
        self.attempts = 0
        self.outcome: PollOutcome | None = None
        self._start_time: float | None = None

    async def run(self) -> None:
        """Poll until settled.

        Raises:
            PollTimeoutError: The deadline passed before a true verdict.
            PollAbortedError: The cancellation handle fired first.
            Exception: Evaluator errors, only when options.fail_fast is set.
        """
        if self._start_time is not None:
            raise RuntimeError("PollOperation can only be run once")

        loop = asyncio.get_running_loop()
        self._start_time = loop.time()

        if self._cancelled():
            self._settle(PollOutcome.CANCELLED)

        wakeup: asyncio.Future[None] = loop.create_future()
        subscription = None
        if self.cancellation is not None:
            subscription = self.cancellation.subscribe(
                lambda: loop.call_soon_threadsafe(_wake, wakeup)
            )

        try:
            while True:
                verdict = await self._check()

                if self._cancelled():
                    self._settle(PollOutcome.CANCELLED)
                if verdict:
                    self._settle(PollOutcome.SUCCESS)
                    return

                delay_ms = self._next_delay_ms()
                await asyncio.wait({wakeup}, timeout=delay_ms / 1000)

                if self._cancelled():
                    self._settle(PollOutcome.CANCELLED)
        finally:
            if subscription is not None and self.cancellation is not None:
                self.cancellation.unsubscribe(subscription)
            if not wakeup.done():
                wakeup.cancel()

    def elapsed_ms(self) -> float:
        if self._start_time is None:
            return 0.0
        return (asyncio.get_running_loop().time() - self._start_time) * 1000

    def _cancelled(self) -> bool:
        return self.cancellation is not None and self.cancellation.fired

    async def _check(self) -> bool:
        """Run one evaluation pass, masking evaluator failures as False."""
        self.attempts += 1

        try:
            verdict = await is_condition_met(self.condition)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.reporter.evaluation_failed(e, self.attempts)
            if self.options.fail_fast:
                raise
            verdict = False

        self.reporter.check_completed(self.attempts, verdict)
        return verdict

    def _next_delay_ms(self) -> float:
        """Compute the timer delay after a false verdict.

        Settles with a timeout when the deadline has passed. With a
        deadline, the delay is capped by the remaining budget so the
        deadline is never overshot by more than needed to notice it.
        """
        timeout_ms = self.options.timeout_ms
        elapsed = self.elapsed_ms()

        if timeout_ms == 0 or (timeout_ms > 0 and elapsed > timeout_ms):
            self._settle(PollOutcome.TIMEOUT)

        if timeout_ms > 0:
            return max(0.0, min(self.options.interval_ms, timeout_ms - elapsed))
        return float(self.options.interval_ms)

    def _settle(self, outcome: PollOutcome) -> None:
        if self.outcome is not None:
            raise RuntimeError(f"PollOperation already settled as {self.outcome.value}")

        self.outcome = outcome
        self.reporter.poll_settled(
            PollResult(
                outcome=outcome,
                attempts=self.attempts,
                elapsed_ms=self.elapsed_ms(),
            )
        )

        if outcome is PollOutcome.TIMEOUT:
            raise PollTimeoutError()
        if outcome is PollOutcome.CANCELLED:
            raise PollAbortedError()


class PollScheduler:
    """Reusable scheduler bound to default options and a reporter.

    Every wait() call runs an independent PollOperation.
    """

    def __init__(
        self,
        reporter: PollReporterPort,
        options: PollOptions | None = None,
    ):
        self.reporter = reporter
        self.options = options or PollOptions()

    async def wait(
        self,
        condition: Condition | Evaluator | Sequence[Evaluator],
        cancellation: CancellationPort | None = None,
        *,
        interval_ms: int | None = None,
        timeout_ms: int | None = None,
    ) -> None:
        """Wait for a condition, overriding the default timing if given.

        Raises:
            PollTimeoutError: The deadline passed before a true verdict.
            PollAbortedError: The cancellation handle fired first.
        """
        options = PollOptions(
            interval_ms=self.options.interval_ms if interval_ms is None else interval_ms,
            timeout_ms=self.options.timeout_ms if timeout_ms is None else timeout_ms,
            fail_fast=self.options.fail_fast,
        )
        operation = PollOperation(condition, options, self.reporter, cancellation)
        logger.debug(
            f"Starting poll (interval={options.interval_ms}ms, timeout={options.timeout_ms}ms)"
        )
        await operation.run()


def _wake(wakeup: asyncio.Future[None]) -> None:
    if not wakeup.done():
        wakeup.set_result(None)
