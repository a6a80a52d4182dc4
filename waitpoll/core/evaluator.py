"""Condition evaluation.

Produces a boolean verdict for one pass over a condition. Evaluator
failures propagate from here; masking them is the scheduler's job.
"""

import asyncio
import inspect
import logging
from collections.abc import Sequence
from typing import Any

from .models import Condition, Evaluator, Multiple, as_condition

logger = logging.getLogger(__name__)


async def _invoke(evaluator: Evaluator) -> Any:
    result = evaluator()
    if inspect.isawaitable(result):
        result = await result
    return result


async def is_condition_met(
    condition: Condition | Evaluator | Sequence[Evaluator],
) -> bool:
    """Evaluate a condition once.

    For a collection, every evaluator is invoked exactly once and the
    results are awaited concurrently; the verdict is True only if every
    result is truthy. For a single evaluator, the verdict is the
    truthiness of its (awaited) result.

    Args:
        condition: A Condition variant, a nullary callable, or a
            list/tuple of nullary callables.

    Returns:
        The verdict for this pass.

    Raises:
        Exception: Whatever an evaluator raised.
    """
    resolved = as_condition(condition)

    if isinstance(resolved, Multiple):
        if not resolved.evaluators:
            return True
        # Every evaluator settles before the pass does, even when one fails.
        results = await asyncio.gather(
            *(_invoke(e) for e in resolved.evaluators), return_exceptions=True
        )
        logger.debug(f"Evaluated {len(results)} evaluators")
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return all(bool(result) for result in results)

    return bool(await _invoke(resolved.evaluator))
