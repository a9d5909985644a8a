"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sc_common.errors import AppError
from src.sc_common.redis_client import close_redis, get_redis
from src.sc_common.request_log import RequestLogMiddleware
from src.sc_display.api.router import router as display_router
from src.sc_feed.api.router import router as feed_router
from src.sc_feed.application.schemas import SnapshotPayload
from src.sc_feed.domain.models import Snapshot

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify Redis when it backs the cache. Shutdown: close it."""
    if settings.CACHE_BACKEND == "redis":
        redis = await get_redis()
        await redis.ping()
    yield
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    # Same error-shaped body the feed endpoint answers with
    payload = SnapshotPayload.from_domain(Snapshot.failed(exc.message, http_status=exc.http_status))
    return JSONResponse(
        status_code=exc.http_status,
        content=payload.to_wire(),
    )


app.include_router(feed_router)
app.include_router(display_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
