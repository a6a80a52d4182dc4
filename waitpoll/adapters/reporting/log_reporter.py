"""Logging reporter adapter.

Default observability side channel for poll operations: writes evaluator
failures, per-pass verdicts and settlement to the standard logging
system.
"""

import logging

from waitpoll.core.models import PollOutcome, PollResult
from waitpoll.core.ports import PollReporterPort

logger = logging.getLogger(__name__)


class LoggingReporter(PollReporterPort):
    """Report poll activity through a logger."""

    def __init__(self, log: logging.Logger | None = None):
        """Initialize logging reporter.

        Args:
            log: Logger to write to. Defaults to this module's logger.
        """
        self.log = log or logger

    def evaluation_failed(self, error: BaseException, attempt: int) -> None:
        self.log.error(
            f"Condition evaluation failed on attempt #{attempt}: {error}",
            exc_info=error,
        )

    def check_completed(self, attempt: int, verdict: bool) -> None:
        self.log.debug(f"Condition check #{attempt}: {'met' if verdict else 'not met'}")

    def poll_settled(self, result: PollResult) -> None:
        message = (
            f"Poll settled with {result.outcome.value} after "
            f"{result.attempts} attempts in {result.elapsed_ms:.1f}ms"
        )
        if result.outcome is PollOutcome.SUCCESS:
            self.log.info(message)
        else:
            self.log.warning(message)
