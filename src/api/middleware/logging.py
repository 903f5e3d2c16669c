"""
Request logging middleware.

Every request gets a short id, echoed back in X-Request-ID, and is logged
with the acting till user when one is identified.
"""

import time
import uuid
from collections.abc import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.config import get_logger

logger = get_logger(__name__)

# Polled by tills; logged at debug to keep the log readable
QUIET_PATHS = frozenset({"/health", "/api/health"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion and timing."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id

        path = request.url.path
        log = logger.bind(
            request_id=request_id,
            method=request.method,
            path=path,
            user_id=request.headers.get("x-user-id"),
        )
        emit = log.debug if path in QUIET_PATHS else log.info

        start = time.perf_counter()
        emit(
            "request_started",
            client=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception as e:
            log.error(
                "request_failed",
                error=str(e),
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        emit(
            "request_completed",
            status=response.status_code,
            duration_ms=round(duration_ms, 2),
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        return response
