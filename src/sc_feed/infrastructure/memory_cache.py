"""Process-local single-slot snapshot store."""

from datetime import datetime

from src.sc_feed.domain.models import CacheEntry, Snapshot


class InMemoryCacheStore:
    """Holds one CacheEntry; set() replaces it wholesale.

    No locking: concurrent writers race and the last write wins.
    """

    def __init__(self, key: str = "siege_cup_tweets") -> None:
        self._key = key
        self._entry: CacheEntry | None = None

    @property
    def key(self) -> str:
        return self._key

    async def get(self) -> CacheEntry | None:
        return self._entry

    async def set(self, snapshot: Snapshot, stored_at: datetime) -> None:
        self._entry = CacheEntry(snapshot=snapshot, stored_at=stored_at)
