import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from nurse_connect.core.request_context import REQUEST_ID_HEADER, resolve_request_id

logger = logging.getLogger("access")


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request, tagged with the request id"""

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = resolve_request_id(request)
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        client = request.client.host if request.client else "-"
        logger.info(
            f"{client} {request.method} {request.url.path} {response.status_code} "
            f"{elapsed * 1000:.1f}ms rid={request.state.request_id}"
        )

        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response
