from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Upstream API. The token has no default; without it every request reports
    # a configuration error instead of fetching.
    TWITTER_BEARER_TOKEN: str | None = None
    TWITTER_API_BASE_URL: str = "https://api.twitter.com"
    TWITTER_USERNAME: str = "Rainbow6Game"

    # Feed
    FILTER_KEYWORD: str = "siege cup"
    CACHE_DURATION_SECONDS: int = 24 * 60 * 60
    FEED_SINGLE_FLIGHT: bool = False
    FEED_SERVE_STALE_ON_ERROR: bool = False

    # Cache store: "memory" (process-local) or "redis"
    CACHE_BACKEND: str = "memory"
    CACHE_KEY: str = "siege_cup_tweets"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_TOKEN: str | None = None

    # Display client: None means call the feed endpoint in-process
    FEED_API_URL: str | None = None

    # App
    APP_NAME: str = "Rainbow Six Siege Cup Tracker"
    DEBUG: bool = False


settings = Settings()
