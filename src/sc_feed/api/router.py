"""sc_feed REST endpoint.

GET /api/tweets — current filtered post snapshot (cached for 24h)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sc_feed.application.factory import build_feed_service
from src.sc_feed.application.schemas import SnapshotPayload
from src.sc_feed.application.service import FeedApplicationService

router = APIRouter(prefix="/api", tags=["tweets"])

_service: FeedApplicationService | None = None


def get_feed_service() -> FeedApplicationService:
    """FastAPI dependency: one service (and cache store) per process."""
    global _service  # noqa: PLW0603
    if _service is None:
        _service = build_feed_service(settings)
    return _service


@router.get("/tweets")
async def get_tweets(
    service: Annotated[FeedApplicationService, Depends(get_feed_service)],
) -> JSONResponse:
    snapshot = await service.get_snapshot()
    payload = SnapshotPayload.from_domain(snapshot)
    return JSONResponse(status_code=snapshot.http_status, content=payload.to_wire())
