"""Asyncio-native cancellation handle.

Implements CancellationPort with a fire-once flag, a listener registry
and an awaitable wait() for callers that want to block on the signal.
"""

import asyncio
import logging
import threading
from collections.abc import Callable

from waitpoll.core.ports import CancellationPort, Subscription

logger = logging.getLogger(__name__)


class CancellationToken(CancellationPort):
    """Edge-triggered cancellation signal.

    cancel() may be called from any thread. Listeners run on the thread
    that fires the token, so listeners that touch an event loop must hop
    onto it themselves (the poll scheduler does).
    """

    def __init__(self) -> None:
        """Initialize an unfired token with no listeners."""
        self._fired = False
        self._listeners: dict[int, Callable[[], None]] = {}
        self._next_id = 0
        self._lock = threading.Lock()
        self._timer: tuple[asyncio.AbstractEventLoop, asyncio.TimerHandle] | None = None

    @property
    def fired(self) -> bool:
        return self._fired

    @property
    def listener_count(self) -> int:
        """Number of live subscriptions."""
        with self._lock:
            return len(self._listeners)

    def subscribe(self, callback: Callable[[], None]) -> Subscription:
        with self._lock:
            if not self._fired:
                subscription_id = self._next_id
                self._next_id += 1
                self._listeners[subscription_id] = callback
                return subscription_id

        # Already fired: the edge has passed, notify right away.
        self._notify(callback)
        return None

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            self._listeners.pop(subscription, None)

    def cancel(self) -> None:
        """Fire the token. Subsequent calls are no-ops."""
        with self._lock:
            if self._fired:
                return
            self._fired = True
            listeners = list(self._listeners.values())
            self._listeners.clear()
            timer, self._timer = self._timer, None

        if timer is not None:
            _cancel_timer(*timer)

        logger.debug(f"Cancellation fired, notifying {len(listeners)} listeners")
        for callback in listeners:
            self._notify(callback)

    def cancel_after(self, seconds: float) -> None:
        """Fire the token after a delay on the running event loop.

        Re-arming replaces any previously armed delay.

        Args:
            seconds: Delay before firing. Must be non-negative.

        Raises:
            ValueError: If seconds is negative.
            RuntimeError: If called outside a running event loop.
        """
        if seconds < 0:
            raise ValueError("seconds must be non-negative")
        loop = asyncio.get_running_loop()

        with self._lock:
            if self._fired:
                return
            previous = self._timer
            self._timer = (loop, loop.call_later(seconds, self.cancel))

        if previous is not None:
            _cancel_timer(*previous)

    async def wait(self) -> None:
        """Block until the token fires."""
        if self._fired:
            return

        loop = asyncio.get_running_loop()
        waiter: asyncio.Future[None] = loop.create_future()

        def _set() -> None:
            if not waiter.done():
                waiter.set_result(None)

        subscription = self.subscribe(lambda: loop.call_soon_threadsafe(_set))
        try:
            await waiter
        finally:
            self.unsubscribe(subscription)

    @staticmethod
    def _notify(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as e:
            logger.error(f"Cancellation listener failed: {e}", exc_info=True)


def _cancel_timer(loop: asyncio.AbstractEventLoop, handle: asyncio.TimerHandle) -> None:
    # Loop handles are not thread-safe; cancel on the owning loop.
    if not loop.is_closed():
        loop.call_soon_threadsafe(handle.cancel)
