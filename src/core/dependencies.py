import asyncio
from contextlib import asynccontextmanager
from typing import Dict, Optional

from fastapi import Request


class TripLockRegistry:
    """One asyncio.Lock per trip id; autosort runs on the same trip are serialized."""

    def __init__(self):
        self._locks: Dict[Optional[int], asyncio.Lock] = {}
        self._users: Dict[Optional[int], int] = {}

    def __len__(self):
        return len(self._locks)

    @asynccontextmanager
    async def hold(self, trip_id: Optional[int]):
        lock = self._locks.setdefault(trip_id, asyncio.Lock())
        self._users[trip_id] = self._users.get(trip_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            # Forget the lock once nobody holds or waits on it
            self._users[trip_id] -= 1
            if not self._users[trip_id]:
                del self._users[trip_id]
                del self._locks[trip_id]


def get_trip_locks(request: Request) -> TripLockRegistry:
    return request.app.state.trip_locks
