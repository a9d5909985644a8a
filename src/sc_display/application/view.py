"""FeedView — display-side state for one page.

State machine:
  LOADING -> SUCCESS | RATE_LIMITED | HARD_ERROR
Every refresh() re-enters LOADING. RATE_LIMITED keeps the payload and shows
the error as an advisory; HARD_ERROR shows only the error and a retry action.
There is no in-flight guard: overlapping refreshes apply in completion order.
"""

import logging
from enum import Enum

from src.sc_common.errors import AppError
from src.sc_display.application.client import FeedClient
from src.sc_feed.application.schemas import MediaOut, PostOut, SnapshotPayload
from src.sc_feed.domain.filters import filter_by_keyword, media_for_keys

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    RATE_LIMITED = "RATE_LIMITED"
    HARD_ERROR = "HARD_ERROR"


class FeedView:
    def __init__(self, client: FeedClient, keyword: str = "siege cup") -> None:
        self._client = client
        self.keyword = keyword
        self.state = ViewState.LOADING
        self.posts: list[PostOut] = []
        self.media: list[MediaOut] = []
        self.last_fetch: str | None = None
        self.next_fetch: str | None = None
        self.rate_limited = False
        self.error: str | None = None

    @property
    def can_refresh(self) -> bool:
        return self.state is not ViewState.LOADING and not self.rate_limited

    async def refresh(self) -> ViewState:
        self.state = ViewState.LOADING
        self.error = None
        self.rate_limited = False
        try:
            payload = await self._client.fetch_snapshot()
        except AppError as exc:
            logger.warning("Feed fetch failed: code=%d %s", exc.code, exc.message)
            self.error = exc.message
            self.state = ViewState.HARD_ERROR
            return self.state
        self.apply(payload)
        return self.state

    def apply(self, payload: SnapshotPayload) -> None:
        self.posts = payload.tweets
        self.media = payload.media
        self.last_fetch = payload.last_fetch
        self.next_fetch = payload.next_fetch
        self.rate_limited = payload.rate_limited
        if payload.rate_limited:
            self.error = payload.error
            self.state = ViewState.RATE_LIMITED
        else:
            self.state = ViewState.SUCCESS

    def visible_posts(self) -> list[PostOut]:
        return filter_by_keyword(self.posts, self.keyword)

    def media_for_post(self, post: PostOut) -> list[MediaOut]:
        return media_for_keys(post.media_keys, self.media)
