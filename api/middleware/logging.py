"""Request logging middleware."""

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("crabops.api")

# Polled by the UI and uptime checks; logged at DEBUG only
QUIET_PATHS = ("/health",)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs every request with timing and a short request ID.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        path = request.url.path
        quiet = path.startswith(QUIET_PATHS)
        start_time = time.perf_counter()

        if not quiet:
            logger.info(f"[{request_id}] {request.method} {path} - Started")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"[{request_id}] {request.method} {path} - "
                f"Error after {duration:.2f}ms: {str(e)}"
            )
            raise

        duration = (time.perf_counter() - start_time) * 1000

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time-Ms"] = f"{duration:.2f}"

        if response.status_code >= 400:
            log_level = logging.WARNING
        elif quiet:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO
        logger.log(
            log_level,
            f"[{request_id}] {request.method} {path} - "
            f"{response.status_code} in {duration:.2f}ms"
        )

        return response


def get_request_id(request: Request) -> str:
    """Get the request ID from the current request."""
    return getattr(request.state, "request_id", "unknown")
