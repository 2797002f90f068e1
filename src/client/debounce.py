"""Trailing-edge debounce for async callbacks"""

import asyncio
from contextlib import suppress
from typing import Awaitable, Callable, Optional


class Debouncer:
    """
    Runs callback once input has been quiet for `delay` seconds

    Each trigger() cancels the pending run and starts a new wait. Needs a
    running event loop.
    """

    def __init__(self, delay: float, callback: Callable[[], Awaitable[None]]):
        self.delay = delay
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def trigger(self) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self) -> None:
        await asyncio.sleep(self.delay)
        await self.callback()

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the pending run, if any, to finish."""
        if self._task is None:
            return
        with suppress(asyncio.CancelledError):
            await self._task
