# site_tree/crawler/gate.py
"""
Concurrency gate: bounds how many fetch+parse operations run at once.
"""
from __future__ import annotations

import asyncio

DEFAULT_CAPACITY = 256


class ConcurrencyGate:
    """Counting pool of fixed capacity, used as ``async with gate: ...``.

    The slot is returned on every exit path of the ``async with`` block.
    ``peak`` remembers the highest simultaneous occupancy observed.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("gate capacity must be >= 1")
        self.capacity = capacity
        self._semaphore = asyncio.Semaphore(capacity)
        self.in_flight = 0
        self.peak = 0

    async def acquire(self) -> None:
        await self._semaphore.acquire()
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)

    def release(self) -> None:
        self.in_flight -= 1
        self._semaphore.release()

    async def __aenter__(self) -> ConcurrencyGate:
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"ConcurrencyGate(capacity={self.capacity}, in_flight={self.in_flight})"
