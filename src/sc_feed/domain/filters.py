"""Keyword filter and media lookup, shared by the service and the display client."""

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar


class _HasText(Protocol):
    @property
    def text(self) -> str | None: ...


class _HasMediaKey(Protocol):
    @property
    def media_key(self) -> str: ...


T = TypeVar("T", bound=_HasText)
M = TypeVar("M", bound=_HasMediaKey)


def matches_keyword(text: str | None, keyword: str) -> bool:
    """Case-insensitive substring match. Absent or empty text never matches."""
    if not text:
        return False
    return keyword.lower() in text.lower()


def filter_by_keyword(posts: Iterable[T], keyword: str) -> list[T]:
    """Keep posts whose text contains keyword, preserving upstream order."""
    return [p for p in posts if matches_keyword(p.text, keyword)]


def media_for_keys(media_keys: Sequence[str] | None, media: Iterable[M]) -> list[M]:
    """Media whose key appears in media_keys, in media-set order."""
    if not media_keys:
        return []
    wanted = set(media_keys)
    return [m for m in media if m.media_key in wanted]
