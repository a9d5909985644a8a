"""Redis-backed single-slot snapshot store.

Value layout under the fixed key (JSON string, no TTL on the key):
  {"data": <wire snapshot>, "cachedAt": <epoch ms>}

Staleness is decided by the reader (the service), not by Redis expiry.
A value that cannot be parsed is logged and treated as a miss.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

import redis.asyncio as aioredis
from pydantic import ValidationError

from src.sc_common.datetime_utils import from_epoch_ms, to_epoch_ms
from src.sc_common.redis_client import get_redis
from src.sc_feed.application.schemas import SnapshotPayload
from src.sc_feed.domain.models import CacheEntry, Snapshot

logger = logging.getLogger(__name__)


class RedisCacheStore:
    def __init__(
        self,
        key: str = "siege_cup_tweets",
        redis_factory: Callable[[], Awaitable[aioredis.Redis]] = get_redis,
    ) -> None:
        self._key = key
        self._redis_factory = redis_factory

    @property
    def key(self) -> str:
        return self._key

    async def get(self) -> CacheEntry | None:
        redis = await self._redis_factory()
        raw = await redis.get(self._key)
        if raw is None:
            return None
        try:
            value = json.loads(raw)
            snapshot = SnapshotPayload.model_validate(value["data"]).to_domain()
            stored_at = from_epoch_ms(int(value["cachedAt"]))
        except (ValueError, TypeError, KeyError, ValidationError) as exc:
            logger.warning("Malformed cache payload under %s: %s", self._key, exc)
            return None
        return CacheEntry(snapshot=snapshot, stored_at=stored_at)

    async def set(self, snapshot: Snapshot, stored_at: datetime) -> None:
        value = {
            "data": SnapshotPayload.from_domain(snapshot).to_wire(),
            "cachedAt": to_epoch_ms(stored_at),
        }
        redis = await self._redis_factory()
        await redis.set(self._key, json.dumps(value))
