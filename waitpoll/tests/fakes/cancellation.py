"""Fake CancellationPort implementation for testing."""

from collections.abc import Callable

from waitpoll.core.ports import CancellationPort, Subscription


class FakeCancellation(CancellationPort):
    """Manually fired cancellation handle.

    Tracks live subscriptions so tests can assert the scheduler releases
    its listener on settlement.
    """

    def __init__(self, fired: bool = False) -> None:
        self._fired = fired
        self.listeners: dict[int, Callable[[], None]] = {}
        self.subscribe_count = 0
        self.unsubscribe_count = 0

    @property
    def fired(self) -> bool:
        return self._fired

    def subscribe(self, callback: Callable[[], None]) -> Subscription:
        self.subscribe_count += 1
        if self._fired:
            callback()
            return None
        subscription_id = self.subscribe_count
        self.listeners[subscription_id] = callback
        return subscription_id

    def unsubscribe(self, subscription: Subscription) -> None:
        self.unsubscribe_count += 1
        self.listeners.pop(subscription, None)

    def fire(self) -> None:
        if self._fired:
            return
        self._fired = True
        for callback in list(self.listeners.values()):
            callback()
