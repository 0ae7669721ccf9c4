"""
Read-write lock for asyncio tasks.

Many readers may hold the lock together; a writer holds it alone.
Writers that are waiting block new readers from entering, so a steady
stream of writers can starve readers. No fairness is promised beyond that.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class RWLock:
    """Basic read-write lock with write lock priority."""

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0

        # Used to indicate that an exclusive lock is held
        self._exclusive = False
        # Number of waiters for an exclusive lock
        self._exclusive_waiters = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def write_locked(self) -> bool:
        return self._exclusive

    async def acquire_read(self) -> None:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._exclusive and self._exclusive_waiters == 0
            )
            self._readers += 1

    async def release_read(self) -> None:
        async with self._cond:
            if self._readers == 0:
                raise RuntimeError("Cannot release an unacquired read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    async def acquire_write(self) -> None:
        async with self._cond:
            self._exclusive_waiters += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._exclusive and self._readers == 0
                )
            finally:
                # A cancelled writer must not keep readers parked.
                self._exclusive_waiters -= 1
                self._cond.notify_all()
            self._exclusive = True

    async def release_write(self) -> None:
        async with self._cond:
            if not self._exclusive:
                raise RuntimeError("Cannot release an unacquired write lock")
            self._exclusive = False
            self._cond.notify_all()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock shared for the body of an ``async with`` block."""
        await self.acquire_read()
        try:
            yield
        finally:
            # Shielded so a timed-out request still gives its slot back.
            await asyncio.shield(self.release_read())

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock exclusively for the body of an ``async with`` block."""
        await self.acquire_write()
        try:
            yield
        finally:
            await asyncio.shield(self.release_write())
