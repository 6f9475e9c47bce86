"""
Unit tests for utils/polling.py - ReadinessPoller
"""
import asyncio

import pytest

from astrbot_plugin_mathjaxloader.utils.polling import ReadinessPoller

from .fakes import RecordingSleep


def ready_on_attempt(k):
    """Predicate that becomes true on the k-th call (1-based)."""
    calls = {"count": 0}

    def is_ready():
        calls["count"] += 1
        return calls["count"] >= k

    is_ready.calls = calls
    return is_ready


class TestReadinessPoller:
    """Test bounded-retry readiness waiting."""

    @pytest.mark.asyncio
    async def test_ready_immediately(self, recording_sleep):
        poller = ReadinessPoller(sleep=recording_sleep)
        assert await poller.wait(lambda: True) is True
        assert recording_sleep.delays == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("k", [2, 5, 20])
    async def test_ready_on_attempt_k(self, recording_sleep, k):
        poller = ReadinessPoller(sleep=recording_sleep)
        assert await poller.wait(ready_on_attempt(k)) is True
        assert recording_sleep.delays == [0.25] * (k - 1)

    @pytest.mark.asyncio
    async def test_never_ready_gives_up_after_twenty_delays(self, recording_sleep):
        poller = ReadinessPoller(sleep=recording_sleep)
        predicate = ready_on_attempt(10_000)

        assert await poller.wait(predicate) is False
        assert len(recording_sleep.delays) == 20
        assert sum(recording_sleep.delays) == pytest.approx(5.0)
        assert predicate.calls["count"] == 21

    @pytest.mark.asyncio
    async def test_custom_interval_and_ceiling(self, recording_sleep):
        poller = ReadinessPoller(interval_ms=100, max_retries=3, sleep=recording_sleep)
        assert await poller.wait(lambda: False) is False
        assert recording_sleep.delays == [0.1, 0.1, 0.1]

    @pytest.mark.asyncio
    async def test_async_predicate(self, recording_sleep):
        state = {"count": 0}

        async def is_ready():
            state["count"] += 1
            return state["count"] == 3

        poller = ReadinessPoller(sleep=recording_sleep)
        assert await poller.wait(is_ready) is True
        assert len(recording_sleep.delays) == 2

    @pytest.mark.asyncio
    async def test_failing_predicate_counts_as_not_ready(self, recording_sleep):
        def is_ready():
            raise RuntimeError("MathJax is not defined")

        poller = ReadinessPoller(max_retries=4, sleep=recording_sleep)
        assert await poller.wait(is_ready) is False
        assert len(recording_sleep.delays) == 4

    @pytest.mark.asyncio
    async def test_concurrent_waits_keep_own_counters(self):
        sleep = RecordingSleep()
        poller = ReadinessPoller(sleep=sleep)

        results = await asyncio.gather(
            poller.wait(ready_on_attempt(3)),
            poller.wait(ready_on_attempt(6)),
            poller.wait(lambda: False),
        )

        assert results == [True, True, False]
        assert len(sleep.delays) == 2 + 5 + 20

    @pytest.mark.asyncio
    async def test_real_sleep_is_bounded(self):
        poller = ReadinessPoller(interval_ms=1, max_retries=5)
        loop = asyncio.get_running_loop()
        start = loop.time()
        assert await poller.wait(lambda: False) is False
        assert loop.time() - start < 1.0
