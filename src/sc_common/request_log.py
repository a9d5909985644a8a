"""Per-request access log for the tracker.

One line per request to the page or the tweets endpoint. A page render makes
its own in-process call to /api/tweets, which is logged as a separate line
marked "inner" so the two can be told apart. The request id is echoed back
in the X-Request-ID header.

    INFO [GET] / → 200 (41ms) req_a1b2c3d4e5f6
    INFO [GET] /api/tweets → 200 (23ms) req_0f9e8d7c6b5a inner
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("sc.request")

# Host the display router uses for its in-process feed client
INTERNAL_HOST = "internal"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = f"req_{uuid.uuid4().hex[:12]}"
        request.state.request_id = request_id

        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "[%s] %s → %d (%.0fms) %s%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
            " inner" if request.url.hostname == INTERNAL_HOST else "",
        )
        response.headers["X-Request-ID"] = request_id
        return response
