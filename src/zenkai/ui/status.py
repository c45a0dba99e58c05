"""Loading status shown while the code agent is working.

Purely local display state: a fixed list of strings advanced on a timer.
Nothing here talks to the network or to the job.
"""

import asyncio
import contextlib
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import Self

LOADING_MESSAGES: tuple[str, ...] = (
    "Thinking...",
    "Loading...",
    "Generating response...",
    "Analyzing your request...",
    "Building your website...",
    "Crafting components...",
    "Optimizing layout...",
    "Adding final touches...",
    "Almost ready...",
)

ROTATION_INTERVAL_SECONDS = 2.0


class StatusRotator:
    """Cycles through status messages, wrapping around after the last one.

    Use as an async context manager so the timer is always cancelled:

        async with StatusRotator(on_change=render) as rotator:
            ...
    """

    def __init__(
        self,
        messages: Sequence[str] = LOADING_MESSAGES,
        interval: float = ROTATION_INTERVAL_SECONDS,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        if not messages:
            raise ValueError("StatusRotator needs at least one message")
        self._messages = tuple(messages)
        self._interval = interval
        self._on_change = on_change
        self._index = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def current(self) -> str:
        return self._messages[self._index]

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def advance(self) -> str:
        """Move to the next message and return it."""
        self._index = (self._index + 1) % len(self._messages)
        if self._on_change is not None:
            self._on_change(self.current)
        return self.current

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.advance()

    def start(self) -> None:
        """Start the timer. Calling start on a running rotator is a no-op."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Cancel the timer and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def __aenter__(self) -> Self:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()
