"""In-flight request tracking for graceful shutdown."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.zenkai.core.logging import get_logger

logger = get_logger(__name__)


class RequestTracker:
    """Counts requests still being served so shutdown can wait for them."""

    def __init__(self) -> None:
        self._in_flight = 0
        self._draining = False
        self._idle = asyncio.Condition()

    @property
    def is_draining(self) -> bool:
        return self._draining

    @property
    def in_flight_count(self) -> int:
        return self._in_flight

    @asynccontextmanager
    async def track(self) -> AsyncGenerator[None]:
        """Count the enclosed block as one in-flight request."""
        async with self._idle:
            self._in_flight += 1
        try:
            yield
        finally:
            async with self._idle:
                self._in_flight -= 1
                if self._in_flight == 0:
                    self._idle.notify_all()

    async def drain(self, timeout: float) -> bool:
        """Enter draining mode and wait up to ``timeout`` seconds for idle.

        Returns:
            True if every tracked request finished in time
        """
        self._draining = True
        logger.info("Draining requests", in_flight=self._in_flight)
        try:
            async with self._idle:
                await asyncio.wait_for(
                    self._idle.wait_for(lambda: self._in_flight == 0), timeout=timeout
                )
        except TimeoutError:
            logger.warning(
                "Shutdown grace period exceeded",
                timeout=timeout,
                in_flight=self._in_flight,
            )
            return False
        logger.info("All requests drained")
        return True

    def reset(self) -> None:
        """Leave draining mode and forget all counts."""
        self._in_flight = 0
        self._draining = False
        self._idle = asyncio.Condition()


request_tracker = RequestTracker()
