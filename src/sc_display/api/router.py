"""sc_display HTML page.

GET /            — render the tracker page
GET /?refresh=1  — manual refresh (same fetch, the view re-enters LOADING)
"""

import logging
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from config.settings import settings
from src.sc_common.request_log import INTERNAL_HOST
from src.sc_display.application.client import FeedClient
from src.sc_display.application.render import render_page
from src.sc_display.application.view import FeedView

logger = logging.getLogger(__name__)

router = APIRouter(tags=["display"])


def get_feed_client(request: Request) -> FeedClient:
    """Configured feed URL, or the feed endpoint of this same app in-process."""
    if settings.FEED_API_URL:
        return FeedClient(base_url=settings.FEED_API_URL)
    return FeedClient(
        base_url=f"http://{INTERNAL_HOST}",
        transport=httpx.ASGITransport(app=request.app),
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    client: Annotated[FeedClient, Depends(get_feed_client)],
    refresh: bool = Query(False, description="Manual refresh requested"),
) -> HTMLResponse:
    if refresh:
        logger.info("Manual refresh requested")
    view = FeedView(client, keyword=settings.FILTER_KEYWORD)
    await view.refresh()
    html = render_page(view, title=settings.APP_NAME, handle=settings.TWITTER_USERNAME)
    return HTMLResponse(content=html)
