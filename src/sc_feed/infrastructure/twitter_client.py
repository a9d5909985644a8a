"""Upstream X/Twitter v2 API client.

Two calls, awaited in sequence by the service:
  GET /2/users/by/username/{handle}    -> account id
  GET /2/users/{id}/tweets             -> recent posts + media expansions

No retries or backoff: a non-2xx answer is raised as an UpstreamError carrying
the status and the upstream body, and the caller decides what to surface.
"""

import logging
from typing import Any

import httpx

from src.sc_common.errors import UpstreamPostsError, UpstreamUserLookupError
from src.sc_feed.domain.models import Media, Post

logger = logging.getLogger(__name__)

POSTS_PARAMS = {
    "expansions": "attachments.media_keys",
    "media.fields": "url,type,preview_image_url",
    "tweet.fields": "created_at,attachments,author_id,text",
}


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


class TwitterClient:
    def __init__(
        self,
        bearer_token: str,
        base_url: str = "https://api.twitter.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bearer_token = bearer_token
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": f"Bearer {self._bearer_token}"},
            transport=self._transport,
        )

    async def get_user_id(self, username: str) -> str:
        async with self._client() as client:
            response = await client.get(f"/2/users/by/username/{username}")
        if not response.is_success:
            logger.warning(
                "User lookup failed: username=%s status=%d", username, response.status_code
            )
            raise UpstreamUserLookupError(response.status_code, _error_body(response))

        # Unknown or suspended handles answer 200 with {"errors": [...]} and no data
        body = response.json()
        user_id = (body.get("data") or {}).get("id") if isinstance(body, dict) else None
        if not user_id:
            logger.warning("User lookup returned no id: username=%s", username)
            raise UpstreamUserLookupError(response.status_code, body)
        return str(user_id)

    async def get_user_posts(self, user_id: str) -> tuple[list[Post], list[Media]]:
        async with self._client() as client:
            response = await client.get(f"/2/users/{user_id}/tweets", params=POSTS_PARAMS)
        if not response.is_success:
            logger.warning(
                "Posts listing failed: user_id=%s status=%d", user_id, response.status_code
            )
            raise UpstreamPostsError(response.status_code, _error_body(response))

        body = response.json()
        posts = [_post_from_api(item) for item in body.get("data") or []]
        media = [_media_from_api(item) for item in (body.get("includes") or {}).get("media") or []]
        return posts, media


def _post_from_api(item: dict[str, Any]) -> Post:
    keys = (item.get("attachments") or {}).get("media_keys")
    return Post(
        id=str(item["id"]),
        text=item.get("text") or "",
        created_at=item.get("created_at") or "",
        author_id=str(item.get("author_id") or ""),
        media_keys=tuple(keys) if keys is not None else None,
    )


def _media_from_api(item: dict[str, Any]) -> Media:
    return Media(
        media_key=item["media_key"],
        type=item.get("type") or "",
        url=item.get("url"),
        preview_image_url=item.get("preview_image_url"),
    )
