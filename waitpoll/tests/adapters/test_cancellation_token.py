"""Tests for CancellationToken."""

import asyncio
import logging
import threading

import pytest

from waitpoll.adapters.cancellation.token import CancellationToken


class TestCancellationToken:
    """Fire-once semantics and listener bookkeeping."""

    def test_starts_unfired(self) -> None:
        token = CancellationToken()

        assert token.fired is False
        assert token.listener_count == 0

    def test_cancel_notifies_listeners_once(self) -> None:
        token = CancellationToken()
        calls: list[str] = []
        token.subscribe(lambda: calls.append("a"))
        token.subscribe(lambda: calls.append("b"))

        token.cancel()
        token.cancel()

        assert token.fired is True
        assert calls == ["a", "b"]
        assert token.listener_count == 0

    def test_subscribe_after_fire_notifies_immediately(self) -> None:
        token = CancellationToken()
        token.cancel()
        calls: list[int] = []

        subscription = token.subscribe(lambda: calls.append(1))
        token.unsubscribe(subscription)

        assert calls == [1]
        assert token.listener_count == 0

    def test_unsubscribe_stops_notification(self) -> None:
        token = CancellationToken()
        calls: list[int] = []
        subscription = token.subscribe(lambda: calls.append(1))

        token.unsubscribe(subscription)
        token.unsubscribe(subscription)
        token.cancel()

        assert calls == []

    def test_failing_listener_does_not_block_others(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        token = CancellationToken()
        calls: list[int] = []

        def broken() -> None:
            raise RuntimeError("listener broke")

        token.subscribe(broken)
        token.subscribe(lambda: calls.append(1))

        with caplog.at_level(logging.ERROR):
            token.cancel()

        assert calls == [1]
        assert "listener broke" in caplog.text

    @pytest.mark.asyncio
    async def test_wait_returns_when_fired(self) -> None:
        token = CancellationToken()
        loop = asyncio.get_running_loop()
        loop.call_later(0.01, token.cancel)

        await asyncio.wait_for(token.wait(), timeout=1.0)

        assert token.fired is True
        assert token.listener_count == 0

    @pytest.mark.asyncio
    async def test_cancel_after_fires_on_loop(self) -> None:
        token = CancellationToken()

        token.cancel_after(0.01)
        assert token.fired is False

        await asyncio.wait_for(token.wait(), timeout=1.0)
        assert token.fired is True

    @pytest.mark.asyncio
    async def test_cancel_after_rearms(self) -> None:
        token = CancellationToken()

        token.cancel_after(10.0)
        token.cancel_after(0.01)

        await asyncio.wait_for(token.wait(), timeout=1.0)

    @pytest.mark.asyncio
    async def test_cancel_after_rejects_negative_delay(self) -> None:
        with pytest.raises(ValueError, match="seconds must be non-negative"):
            CancellationToken().cancel_after(-1)

    def test_cancel_after_requires_running_loop(self) -> None:
        with pytest.raises(RuntimeError):
            CancellationToken().cancel_after(1.0)

    @pytest.mark.asyncio
    async def test_cancel_from_another_thread(self) -> None:
        token = CancellationToken()
        thread = threading.Timer(0.01, token.cancel)
        thread.start()

        try:
            await asyncio.wait_for(token.wait(), timeout=1.0)
        finally:
            thread.join()

        assert token.fired is True

    @pytest.mark.asyncio
    async def test_cancel_from_thread_disarms_delay(self) -> None:
        token = CancellationToken()
        token.cancel_after(10.0)
        assert token._timer is not None
        _, handle = token._timer

        thread = threading.Timer(0.01, token.cancel)
        thread.start()
        try:
            await asyncio.wait_for(token.wait(), timeout=1.0)
        finally:
            thread.join()
        await asyncio.sleep(0)

        assert token._timer is None
        assert handle.cancelled()

    @pytest.mark.asyncio
    async def test_cancel_after_is_noop_once_fired(self) -> None:
        token = CancellationToken()
        token.cancel()

        token.cancel_after(0.01)

        assert token._timer is None
