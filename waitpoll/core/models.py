"""Domain models for the waitpoll polling utility.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

Evaluator: TypeAlias = Callable[[], Any | Awaitable[Any]]


@dataclass(frozen=True)
class Single:
    """A condition made of one nullary evaluator."""

    evaluator: Evaluator

    def __post_init__(self) -> None:
        """Validate the evaluator is callable."""
        if not callable(self.evaluator):
            raise TypeError("evaluator must be callable")


@dataclass(frozen=True)
class Multiple:
    """A condition made of an ordered collection of evaluators.

    The verdict is the logical AND of every evaluator's result. An empty
    collection is vacuously true.
    """

    evaluators: tuple[Evaluator, ...]

    def __post_init__(self) -> None:
        """Validate every evaluator is callable."""
        for index, evaluator in enumerate(self.evaluators):
            if not callable(evaluator):
                raise TypeError(f"evaluator at index {index} must be callable")


Condition: TypeAlias = Single | Multiple


def as_condition(condition: Condition | Evaluator | Sequence[Evaluator]) -> Condition:
    """Resolve a caller-supplied condition into its tagged variant.

    Args:
        condition: A Single/Multiple variant, a nullary callable, or a
            list/tuple of nullary callables.

    Returns:
        The Single or Multiple variant for the condition.

    Raises:
        TypeError: If the condition has an unsupported shape.
    """
    if isinstance(condition, (Single, Multiple)):
        return condition
    if isinstance(condition, (list, tuple)):
        return Multiple(tuple(condition))
    if callable(condition):
        return Single(condition)
    raise TypeError(
        f"condition must be a callable or a list of callables, got {type(condition).__name__}"
    )


@dataclass(frozen=True)
class PollOptions:
    """Timing options for one poll operation.

    timeout_ms semantics:
    - -1: no deadline
    - 0: fail on the first negative check
    - >0: absolute deadline in milliseconds from operation start
    """

    interval_ms: int = 1000
    timeout_ms: int = -1
    fail_fast: bool = False

    def __post_init__(self) -> None:
        """Validate option ranges on creation."""
        if self.interval_ms < 0:
            raise ValueError("interval_ms must be non-negative")
        if self.timeout_ms < -1:
            raise ValueError("timeout_ms must be -1, 0 or positive")

    @property
    def has_deadline(self) -> bool:
        return self.timeout_ms > 0


class PollOutcome(Enum):
    """Terminal outcome of a poll operation."""

    SUCCESS = "success"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PollResult:
    """Summary reported once when a poll operation settles."""

    outcome: PollOutcome
    attempts: int
    elapsed_ms: float

    def __post_init__(self) -> None:
        if self.attempts < 0:
            raise ValueError("attempts must be non-negative")


class PollError(Exception):
    """Base class for terminal poll failures."""


class PollTimeoutError(PollError, TimeoutError):
    """The deadline passed before the condition was met."""

    def __init__(self, message: str = "Timeout") -> None:
        super().__init__(message)


class PollAbortedError(PollError):
    """The cancellation handle fired before the condition was met."""

    def __init__(self, message: str = "Aborted") -> None:
        super().__init__(message)
