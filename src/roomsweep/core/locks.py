"""Per-room advisory locking with LRU eviction."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections import OrderedDict
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class RoomLockManager(ABC):
    """Abstract base for per-room locking.

    The room-files cleanup holds a room's lock from its idle checks until
    the directory is gone. Whiteboard writers and stream registries that
    take the same lock cannot slip in between check and delete.
    """

    @abstractmethod
    @asynccontextmanager
    async def locked(self, room_id: str) -> AsyncIterator[None]:
        """Acquire an exclusive lock for *room_id*."""
        yield  # pragma: no cover


class InMemoryLockManager(RoomLockManager):
    """In-process per-room ``asyncio.Lock`` objects.

    Idle locks beyond ``max_locks`` are evicted oldest first. Suitable for
    single-process deployments only.
    """

    def __init__(self, max_locks: int = 1024) -> None:
        self._locks: OrderedDict[str, asyncio.Lock] = OrderedDict()
        self._waiters: dict[str, int] = {}
        self._max_locks = max_locks

    def _get_lock(self, room_id: str) -> asyncio.Lock:
        lock = self._locks.get(room_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[room_id] = lock
        else:
            self._locks.move_to_end(room_id)
        self._waiters[room_id] = self._waiters.get(room_id, 0) + 1
        self._evict()
        return lock

    def _release_ref(self, room_id: str) -> None:
        count = self._waiters.get(room_id, 0) - 1
        if count <= 0:
            self._waiters.pop(room_id, None)
        else:
            self._waiters[room_id] = count

    def _evict(self) -> None:
        excess = len(self._locks) - self._max_locks
        if excess <= 0:
            return
        for key in [k for k, lock in self._locks.items() if not lock.locked()]:
            if excess <= 0:
                break
            if self._waiters.get(key, 0) > 0:
                continue
            del self._locks[key]
            excess -= 1

    @asynccontextmanager
    async def locked(self, room_id: str) -> AsyncIterator[None]:
        lock = self._get_lock(room_id)
        try:
            async with lock:
                yield
        finally:
            self._release_ref(room_id)

    @property
    def size(self) -> int:
        """Return the number of locks currently tracked."""
        return len(self._locks)
