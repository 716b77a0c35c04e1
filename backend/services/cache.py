"""Simple in-memory TTL cache for channel snapshots. No Redis needed.

Entries expire lazily: a read past the TTL reports a miss but leaves the
entry in place until the next successful fetch for that key overwrites it.
There is no size bound and no background sweep, so keys that are never
requested again stay in memory until restart. Acceptable at this scale.

Each uvicorn worker owns its own instance.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass

from models import ChannelSnapshot

CACHE_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class CacheEntry:
    snapshot: ChannelSnapshot
    stored_at: float


class ResponseCache:
    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self._store: dict[str, CacheEntry] = {}
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def get(self, key: str) -> CacheEntry | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._ttl_seconds:
            return None
        return entry

    def put(self, key: str, snapshot: ChannelSnapshot) -> CacheEntry:
        entry = CacheEntry(snapshot=snapshot, stored_at=self._clock())
        self._store[key] = entry
        return entry

    def __len__(self) -> int:
        return len(self._store)
