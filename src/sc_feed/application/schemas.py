"""Pydantic schemas for the /api/tweets wire format.

Field names follow the upstream API for posts and media (snake_case) and
camelCase for the envelope:
  {tweets, media, lastFetch, nextFetch, rateLimited, error?, details?, isTestData?}

Timestamps are ISO-8601 UTC strings with millisecond precision, or null.
The same schemas are used by the Redis cache store and the display client,
so a snapshot survives serialize -> parse unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.sc_common.datetime_utils import parse_iso, to_iso_z
from src.sc_feed.domain.models import Media, Post, Snapshot

# Envelope keys left out of the body when unset
_OPTIONAL_KEYS = ("error", "details", "isTestData")


class AttachmentsOut(BaseModel):
    media_keys: list[str] | None = None


class PostOut(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    text: str = ""
    created_at: str = ""
    author_id: str = ""
    attachments: AttachmentsOut | None = None

    @property
    def media_keys(self) -> list[str] | None:
        return self.attachments.media_keys if self.attachments else None

    @classmethod
    def from_domain(cls, post: Post) -> "PostOut":
        attachments = (
            AttachmentsOut(media_keys=list(post.media_keys))
            if post.media_keys is not None
            else None
        )
        return cls(
            id=post.id,
            text=post.text,
            created_at=post.created_at,
            author_id=post.author_id,
            attachments=attachments,
        )

    def to_domain(self) -> Post:
        keys = self.media_keys
        return Post(
            id=self.id,
            text=self.text,
            created_at=self.created_at,
            author_id=self.author_id,
            media_keys=tuple(keys) if keys is not None else None,
        )


class MediaOut(BaseModel):
    model_config = ConfigDict(extra="ignore")

    media_key: str
    type: str
    url: str | None = None
    preview_image_url: str | None = None

    @classmethod
    def from_domain(cls, media: Media) -> "MediaOut":
        return cls(
            media_key=media.media_key,
            type=media.type,
            url=media.url,
            preview_image_url=media.preview_image_url,
        )

    def to_domain(self) -> Media:
        return Media(
            media_key=self.media_key,
            type=self.type,
            url=self.url,
            preview_image_url=self.preview_image_url,
        )


class SnapshotPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tweets: list[PostOut] = Field(default_factory=list)
    media: list[MediaOut] = Field(default_factory=list)
    last_fetch: str | None = Field(None, alias="lastFetch")
    next_fetch: str | None = Field(None, alias="nextFetch")
    rate_limited: bool = Field(False, alias="rateLimited")
    error: str | None = None
    details: Any = None
    is_test_data: bool | None = Field(None, alias="isTestData")

    @classmethod
    def from_domain(cls, snapshot: Snapshot) -> "SnapshotPayload":
        return cls(
            tweets=[PostOut.from_domain(p) for p in snapshot.posts],
            media=[MediaOut.from_domain(m) for m in snapshot.media],
            last_fetch=to_iso_z(snapshot.last_fetch) if snapshot.last_fetch else None,
            next_fetch=to_iso_z(snapshot.next_fetch) if snapshot.next_fetch else None,
            rate_limited=snapshot.rate_limited,
            error=snapshot.error,
            details=snapshot.details,
            is_test_data=snapshot.is_test_data,
        )

    def to_domain(self, http_status: int = 200) -> Snapshot:
        return Snapshot(
            posts=[t.to_domain() for t in self.tweets],
            media=[m.to_domain() for m in self.media],
            last_fetch=parse_iso(self.last_fetch) if self.last_fetch else None,
            next_fetch=parse_iso(self.next_fetch) if self.next_fetch else None,
            rate_limited=self.rate_limited,
            error=self.error,
            details=self.details,
            is_test_data=self.is_test_data,
            http_status=http_status,
        )

    def to_wire(self) -> dict[str, Any]:
        """camelCase body; error/details/isTestData omitted when unset."""
        body = self.model_dump(by_alias=True, exclude_none=False)
        body["tweets"] = [t.model_dump(exclude_none=True) for t in self.tweets]
        body["media"] = [m.model_dump(exclude_none=True) for m in self.media]
        for key in _OPTIONAL_KEYS:
            if body.get(key) is None:
                body.pop(key, None)
        return body
