"""Composition root for waitpoll.

This module is the only place that imports both core logic and concrete
adapters. It wires the default LoggingReporter into the scheduler and
exposes the primary entry points.
"""

import logging
from collections.abc import Sequence

from waitpoll.adapters.reporting.log_reporter import LoggingReporter
from waitpoll.config import Settings, configure_logging, load_settings
from waitpoll.core.evaluator import is_condition_met
from waitpoll.core.models import Condition, Evaluator, PollOptions
from waitpoll.core.ports import CancellationPort, PollReporterPort
from waitpoll.core.scheduler import PollOperation, PollScheduler

logger = logging.getLogger(__name__)


async def wait_polled_condition(
    condition: Condition | Evaluator | Sequence[Evaluator],
    interval_ms: int = 1000,
    timeout_ms: int = -1,
    cancellation: CancellationPort | None = None,
    *,
    reporter: PollReporterPort | None = None,
    fail_fast: bool = False,
) -> None:
    """Wait until a polled condition is met.

    The condition is checked immediately and then every interval_ms until
    it is met, the timeout elapses, or the cancellation handle fires.
    Evaluator errors are reported and count as "not met" unless fail_fast
    is set. A condition that always raises with no timeout and no
    cancellation never settles.

    Args:
        condition: Nullary callable, list of nullary callables, or a
            Single/Multiple condition. Callables may return awaitables.
        interval_ms: Minimum spacing between checks in milliseconds.
        timeout_ms: -1 for no deadline, 0 to fail on the first negative
            check, otherwise a deadline in milliseconds from the start.
        cancellation: Optional external cancellation handle.
        reporter: Side channel for failures and outcomes. Defaults to a
            LoggingReporter.
        fail_fast: Propagate evaluator errors instead of masking them.

    Raises:
        PollTimeoutError: The deadline passed before the condition was met.
        PollAbortedError: The cancellation handle fired first.
    """
    options = PollOptions(interval_ms=interval_ms, timeout_ms=timeout_ms, fail_fast=fail_fast)
    operation = PollOperation(
        condition,
        options,
        reporter or LoggingReporter(),
        cancellation,
    )
    await operation.run()


def create_scheduler(
    settings: Settings | None = None,
    reporter: PollReporterPort | None = None,
) -> PollScheduler:
    """Build a PollScheduler from settings.

    Also applies the settings' log_level and log_format to the root
    logger. This is a no-op when logging is already configured.

    Args:
        settings: Settings to read poll defaults from. Loaded from the
            environment when omitted.
        reporter: Reporter to use. Defaults to a LoggingReporter.

    Returns:
        Configured PollScheduler.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level, settings.log_format)
    options = settings.to_poll_options()
    logger.debug(
        f"Creating poll scheduler (interval={options.interval_ms}ms, "
        f"timeout={options.timeout_ms}ms, fail_fast={options.fail_fast})"
    )
    return PollScheduler(reporter=reporter or LoggingReporter(), options=options)


__all__ = ["create_scheduler", "is_condition_met", "wait_polled_condition"]
