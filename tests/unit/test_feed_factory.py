"""Tests for wiring the feed service from settings."""
import pytest

from config.settings import Settings
from src.sc_feed.application.factory import build_cache_store, build_feed_service
from src.sc_feed.infrastructure.memory_cache import InMemoryCacheStore
from src.sc_feed.infrastructure.redis_cache import RedisCacheStore


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestBuildCacheStore:
    def test_memory_is_default(self) -> None:
        store = build_cache_store(_settings())
        assert isinstance(store, InMemoryCacheStore)
        assert store.key == "siege_cup_tweets"

    def test_redis_backend(self) -> None:
        store = build_cache_store(_settings(CACHE_BACKEND="redis", CACHE_KEY="k"))
        assert isinstance(store, RedisCacheStore)
        assert store.key == "k"

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValueError, match="CACHE_BACKEND"):
            build_cache_store(_settings(CACHE_BACKEND="memcached"))


class TestBuildFeedService:
    async def test_without_token_reports_missing_credential(self) -> None:
        svc = build_feed_service(_settings(TWITTER_BEARER_TOKEN=None))

        snap = await svc.get_snapshot()

        assert "TWITTER_BEARER_TOKEN" in snap.error
        assert snap.http_status == 200

    async def test_uses_given_store(self) -> None:
        store = InMemoryCacheStore()
        svc = build_feed_service(_settings(TWITTER_BEARER_TOKEN=None), store=store)

        await svc.get_snapshot()

        assert await store.get() is None
