"""Domain models for sc_feed — pure dataclasses, no I/O."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Post:
    id: str
    text: str
    created_at: str
    author_id: str
    media_keys: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Media:
    media_key: str
    type: str                          # photo | video | animated_gif
    url: str | None = None             # photo
    preview_image_url: str | None = None  # video


@dataclass
class Snapshot:
    """Filtered posts plus fetch timestamps, served verbatim until expiry.

    http_status is the status the feed endpoint answers with; it is not part
    of the wire body.
    """

    posts: list[Post] = field(default_factory=list)
    media: list[Media] = field(default_factory=list)
    last_fetch: datetime | None = None
    next_fetch: datetime | None = None
    rate_limited: bool = False
    error: str | None = None
    details: Any = None
    is_test_data: bool | None = None
    http_status: int = 200

    @classmethod
    def failed(
        cls,
        error: str,
        http_status: int = 200,
        rate_limited: bool = False,
        details: Any = None,
    ) -> "Snapshot":
        """Error-shaped snapshot: empty collections, null timestamps."""
        return cls(
            error=error,
            http_status=http_status,
            rate_limited=rate_limited,
            details=details,
        )

    def annotated(self, error: str, rate_limited: bool) -> "Snapshot":
        """Copy carrying a failure message, used when serving a stale entry."""
        return replace(self, error=error, rate_limited=rate_limited, http_status=200)


@dataclass
class CacheEntry:
    snapshot: Snapshot
    stored_at: datetime
