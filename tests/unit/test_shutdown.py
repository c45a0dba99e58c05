"""Tests for graceful shutdown request tracking."""

import asyncio

import pytest

from src.zenkai.core.shutdown import RequestTracker

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]


class TestRequestTracker:
    async def test_counts_in_flight_requests(self):
        tracker = RequestTracker()

        async with tracker.track():
            assert tracker.in_flight_count == 1
            async with tracker.track():
                assert tracker.in_flight_count == 2

        assert tracker.in_flight_count == 0
        assert tracker.is_draining is False

    async def test_drain_when_idle_returns_immediately(self):
        tracker = RequestTracker()

        assert await tracker.drain(timeout=1.0) is True
        assert tracker.is_draining is True

    async def test_drain_waits_for_in_flight_request(self):
        tracker = RequestTracker()
        finished = []

        async def request():
            async with tracker.track():
                await asyncio.sleep(0.1)
                finished.append(True)

        task = asyncio.create_task(request())
        await asyncio.sleep(0.02)

        assert await tracker.drain(timeout=1.0) is True
        assert finished == [True]
        await task

    async def test_drain_times_out(self):
        tracker = RequestTracker()
        release = asyncio.Event()

        async def request():
            async with tracker.track():
                await release.wait()

        task = asyncio.create_task(request())
        await asyncio.sleep(0.02)

        assert await tracker.drain(timeout=0.05) is False
        assert tracker.in_flight_count == 1

        release.set()
        await task
        assert tracker.in_flight_count == 0

    async def test_reset(self):
        tracker = RequestTracker()
        await tracker.drain(timeout=0.1)

        tracker.reset()

        assert tracker.is_draining is False
        assert tracker.in_flight_count == 0
