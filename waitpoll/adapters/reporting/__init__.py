"""Reporter adapters for poll observability."""

from .log_reporter import LoggingReporter

__all__ = ["LoggingReporter"]
