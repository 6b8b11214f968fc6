import time
import uuid
import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.logging.structlog_logs import logger


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log every request and echo an X-Request-ID header."""

    async def dispatch(self, request: Request, call_next):
        t0 = time.perf_counter()
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        # routes read the id from here to hand it to the use cases
        request.state.request_id = rid

        structlog.contextvars.bind_contextvars(request_id=rid)
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
        dt_ms = int((time.perf_counter() - t0) * 1000)
        response.headers["X-Request-ID"] = rid

        logger.info(
            "http_request",
            request_id=rid,
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=dt_ms,
            client_ip=request.client.host if request.client else "unknown",
        )
        return response
