"""
Roster API: Request Logging Middleware
========================================

What:  One access-log line per request on the `roster.access` logger.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address. Request bodies are never logged.

Log levels follow the status code:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Unhandled errors:
    An exception no handler in roster.main claimed becomes
    500 {"error": str(exc)} here, with its traceback on `roster.errors`.
    Building the reply inside the middleware stack means it is access-logged
    and still passes through RequestIDMiddleware for its X-Request-ID.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from roster.middleware.request_id import request_id_var

logger = logging.getLogger("roster.access")
error_logger = logging.getLogger("roster.errors")

# Probed every few seconds by orchestrators
SKIP_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def unexpected_error_response(exc: Exception) -> JSONResponse:
    rid = request_id_var.get("")
    error_logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            response = unexpected_error_response(exc)

        if path in SKIP_PATHS:
            return response

        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code
        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
