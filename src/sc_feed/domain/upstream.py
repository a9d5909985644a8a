# src/sc_feed/domain/upstream.py
"""Upstream client Protocol. Unit tests inject a mock conforming to it."""

from typing import Protocol

from src.sc_feed.domain.models import Media, Post


class UpstreamClientProtocol(Protocol):
    async def get_user_id(self, username: str) -> str: ...

    async def get_user_posts(self, user_id: str) -> tuple[list[Post], list[Media]]: ...
