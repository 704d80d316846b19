from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional


class Debouncer:
    """
    Runs ``callback(value)`` once input has been quiet for ``delay`` seconds.

    Each trigger() cancels the pending scheduled task (if any) and schedules a
    new one, so at most one task is pending at a time. Once the callback has
    started it is no longer cancelled by later triggers.
    """

    def __init__(self, delay: float, callback: Callable[[Any], Awaitable[None]]):
        self.delay = delay
        self.callback = callback
        self._task: Optional[asyncio.Task] = None
        self._fired = False

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done() and not self._fired

    def trigger(self, value: Any) -> None:
        self.cancel()
        self._fired = False
        self._task = asyncio.get_running_loop().create_task(self._run(value))

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()

    async def wait(self) -> None:
        """Wait until the latest scheduled run (sleep plus callback) has finished."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})

    async def _run(self, value: Any) -> None:
        await asyncio.sleep(self.delay)
        self._fired = True
        await self.callback(value)
