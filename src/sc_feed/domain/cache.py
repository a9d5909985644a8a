# src/sc_feed/domain/cache.py
"""Cache store Protocol — single-slot holder of the latest Snapshot.

The service is handed a store instead of keeping module-level state, so unit
tests inject an in-memory store or a mock; production picks memory or Redis.
"""

from datetime import datetime
from typing import Protocol

from src.sc_feed.domain.models import CacheEntry, Snapshot


class CacheStoreProtocol(Protocol):
    @property
    def key(self) -> str: ...

    async def get(self) -> CacheEntry | None: ...

    async def set(self, snapshot: Snapshot, stored_at: datetime) -> None: ...
