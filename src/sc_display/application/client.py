"""HTTP client for the feed endpoint, as seen from the display side."""

import httpx
from pydantic import ValidationError

from src.sc_common.errors import FeedFetchError, SnapshotParseError
from src.sc_feed.application.schemas import SnapshotPayload

FEED_PATH = "/api/tweets"


class FeedClient:
    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        path: str = FEED_PATH,
    ) -> None:
        self._base_url = base_url
        self._transport = transport
        self._path = path

    async def fetch_snapshot(self) -> SnapshotPayload:
        """GET the snapshot.

        Raises SnapshotParseError when the body is not JSON, FeedFetchError
        when the status is not 2xx or the endpoint is unreachable. A 200 with
        rateLimited=true is returned normally; the caller decides how to
        present it.
        """
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, transport=self._transport
            ) as client:
                response = await client.get(self._path)
        except httpx.HTTPError as exc:
            raise FeedFetchError(f"Could not reach the tweets endpoint: {exc}", 502) from exc

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            raise SnapshotParseError(response.text)

        try:
            data = response.json()
        except ValueError as exc:
            raise SnapshotParseError(response.text) from exc

        if not response.is_success:
            message = data.get("error") if isinstance(data, dict) else None
            raise FeedFetchError(message, response.status_code)

        try:
            return SnapshotPayload.model_validate(data)
        except ValidationError as exc:
            raise SnapshotParseError(response.text) from exc
