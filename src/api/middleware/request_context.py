"""Per-request context: request ID, structlog contextvars and access log."""

import time
import uuid
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 128

# Probed by load balancers every few seconds.
QUIET_PATHS = frozenset({"/health"})


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a caller supplied ID if it is short and printable."""
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH and incoming.isprintable():
        return incoming
    return str(uuid.uuid4())


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log how it ended.

    The ID is stored on ``request.state`` for the exception handlers, bound
    into structlog contextvars so repository logs carry it, and echoed back
    in the ``X-Request-ID`` response header.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        def elapsed_ms() -> float:
            return round((time.perf_counter() - started) * 1000, 2)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error("request_failed", error=str(e), duration_ms=elapsed_ms())
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        if request.url.path not in QUIET_PATHS:
            log = logger.warning if response.status_code >= 400 else logger.info
            log(
                "request_completed",
                status_code=response.status_code,
                duration_ms=elapsed_ms(),
            )
        return response
