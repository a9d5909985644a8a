"""Wire a FeedApplicationService from settings."""

from datetime import timedelta

from config.settings import Settings
from src.sc_feed.application.service import FeedApplicationService
from src.sc_feed.domain.cache import CacheStoreProtocol
from src.sc_feed.infrastructure.memory_cache import InMemoryCacheStore
from src.sc_feed.infrastructure.redis_cache import RedisCacheStore
from src.sc_feed.infrastructure.twitter_client import TwitterClient


def build_cache_store(settings: Settings) -> CacheStoreProtocol:
    backend = settings.CACHE_BACKEND.lower()
    if backend == "memory":
        return InMemoryCacheStore(key=settings.CACHE_KEY)
    if backend == "redis":
        return RedisCacheStore(key=settings.CACHE_KEY)
    raise ValueError(f"Unknown CACHE_BACKEND: {settings.CACHE_BACKEND!r}")


def build_feed_service(
    settings: Settings, store: CacheStoreProtocol | None = None
) -> FeedApplicationService:
    client = (
        TwitterClient(settings.TWITTER_BEARER_TOKEN, base_url=settings.TWITTER_API_BASE_URL)
        if settings.TWITTER_BEARER_TOKEN
        else None
    )
    return FeedApplicationService(
        store=store or build_cache_store(settings),
        client=client,
        username=settings.TWITTER_USERNAME,
        keyword=settings.FILTER_KEYWORD,
        cache_duration=timedelta(seconds=settings.CACHE_DURATION_SECONDS),
        single_flight=settings.FEED_SINGLE_FLIGHT,
        serve_stale_on_error=settings.FEED_SERVE_STALE_ON_ERROR,
    )
