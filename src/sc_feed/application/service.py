"""FeedApplicationService — fetch, filter and cache the post snapshot.

Read path: a cache entry younger than cache_duration is returned as-is.
Refresh path: resolve account id -> list posts -> keyword filter -> store.
Failures are turned into error-shaped snapshots and never cached, so the
next call retries the upstream.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from src.sc_common.datetime_utils import utc_now
from src.sc_common.errors import (
    AppError,
    CredentialNotConfiguredError,
    InternalError,
    UpstreamError,
)
from src.sc_feed.domain.cache import CacheStoreProtocol
from src.sc_feed.domain.filters import filter_by_keyword
from src.sc_feed.domain.models import CacheEntry, Snapshot
from src.sc_feed.domain.upstream import UpstreamClientProtocol

logger = logging.getLogger(__name__)

CACHE_DURATION = timedelta(hours=24)


class FeedApplicationService:
    def __init__(
        self,
        store: CacheStoreProtocol,
        client: UpstreamClientProtocol | None,
        username: str = "Rainbow6Game",
        keyword: str = "siege cup",
        cache_duration: timedelta = CACHE_DURATION,
        clock: Callable[[], datetime] = utc_now,
        single_flight: bool = False,
        serve_stale_on_error: bool = False,
    ) -> None:
        self._store = store
        self._client = client
        self._username = username
        self._keyword = keyword
        self._cache_duration = cache_duration
        self._clock = clock
        self._single_flight = single_flight
        self._serve_stale_on_error = serve_stale_on_error
        # Guards the refresh path of this service's single cache key
        self._refresh_lock = asyncio.Lock()

    async def get_snapshot(self) -> Snapshot:
        try:
            now = self._clock()
            entry = await self._store.get()
            if self._is_fresh(entry, now):
                logger.debug("Snapshot cache hit: key=%s", self._store.key)
                return entry.snapshot  # type: ignore[union-attr]

            if not self._single_flight:
                return await self._refresh(now, entry)

            async with self._refresh_lock:
                # Another request may have refreshed while we waited
                now = self._clock()
                entry = await self._store.get()
                if self._is_fresh(entry, now):
                    return entry.snapshot  # type: ignore[union-attr]
                return await self._refresh(now, entry)
        except Exception:
            logger.exception("Unexpected error while building snapshot")
            err = InternalError()
            return Snapshot.failed(err.message, http_status=err.http_status)

    def _is_fresh(self, entry: CacheEntry | None, now: datetime) -> bool:
        return entry is not None and now - entry.stored_at < self._cache_duration

    async def _refresh(self, now: datetime, stale: CacheEntry | None) -> Snapshot:
        logger.info("Snapshot cache miss: key=%s, fetching upstream", self._store.key)
        try:
            snapshot = await self._fetch(now)
        except AppError as exc:
            return self._failure(exc, stale)

        await self._store.set(snapshot, now)
        logger.info(
            "Snapshot stored: key=%s posts=%d media=%d",
            self._store.key,
            len(snapshot.posts),
            len(snapshot.media),
        )
        return snapshot

    async def _fetch(self, now: datetime) -> Snapshot:
        if self._client is None:
            raise CredentialNotConfiguredError()

        user_id = await self._client.get_user_id(self._username)
        posts, media = await self._client.get_user_posts(user_id)

        # Media is returned unfiltered, including media of dropped posts
        return Snapshot(
            posts=filter_by_keyword(posts, self._keyword),
            media=media,
            last_fetch=now,
            next_fetch=now + self._cache_duration,
            rate_limited=False,
            is_test_data=False,
        )

    def _failure(self, exc: AppError, stale: CacheEntry | None) -> Snapshot:
        rate_limited = isinstance(exc, UpstreamError) and exc.rate_limited
        details = exc.details if isinstance(exc, UpstreamError) else None
        logger.warning(
            "Snapshot refresh failed: code=%d status=%d rate_limited=%s",
            exc.code,
            exc.http_status,
            rate_limited,
        )
        if self._serve_stale_on_error and stale is not None:
            return stale.snapshot.annotated(exc.message, rate_limited)
        return Snapshot.failed(
            exc.message,
            http_status=exc.http_status,
            rate_limited=rate_limited,
            details=details,
        )
