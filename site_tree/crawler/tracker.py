# site_tree/crawler/tracker.py
"""
Completion tracker: join counter over the crawl tasks spawned during a run.
"""
from __future__ import annotations

import asyncio
from typing import Coroutine, Optional, Set


class CompletionTracker:
    """Spawns tasks, counts them, and lets the caller wait until all are done.

    The counter goes up in :meth:`spawn` before the task is scheduled and down
    in the task's done callback, so every spawned task is joined exactly once
    whether it returns, raises or gets cancelled.
    """

    def __init__(self) -> None:
        self._tasks: Set[asyncio.Task] = set()
        self._idle = asyncio.Event()
        self._idle.set()
        self._error: Optional[BaseException] = None
        self.spawned = 0
        self.finished = 0

    @property
    def pending(self) -> int:
        return self.spawned - self.finished

    def spawn(self, coro: Coroutine, *, name: Optional[str] = None) -> asyncio.Task:
        self.spawned += 1
        self._idle.clear()
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        self.finished += 1
        if not task.cancelled() and task.exception() is not None and self._error is None:
            self._error = task.exception()
        if self.pending == 0:
            self._idle.set()

    async def wait(self) -> None:
        """Block until the counter is back to zero.

        Re-raises the first unexpected exception raised by a tracked task.
        If the wait itself is cancelled, every tracked task is cancelled and
        joined before the cancellation propagates.
        """
        try:
            await self._idle.wait()
        except asyncio.CancelledError:
            await self.cancel_all()
            raise
        if self._error is not None:
            raise self._error

    async def cancel_all(self) -> None:
        """Cancel every running task and wait until all of them are done."""
        while self._tasks:
            tasks = list(self._tasks)
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
