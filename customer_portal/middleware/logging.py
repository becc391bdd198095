"""
Customer Portal - Access Logging
==================================

What:  One access line per request, plus a log filter that stamps the
       current request ID onto every record.
How:   The middleware reports the route template that served the request
       (`/api/customers/{customer_id}`), so lookups for different ids group
       under one key. Requests no route claimed (static files, 404s) are
       reported by their raw path. Level follows the status class.

Log line:
    GET /api/customers/{customer_id} 404 0.4ms
    GET /robots.txt 200 1.2ms
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from customer_portal.middleware.request_id import request_id_var

logger = logging.getLogger("customer_portal.access")

# Polled continuously by process managers.
SKIPPED_PATHS = {"/api/health"}


class RequestIdLogFilter(logging.Filter):
    """Adds `request_id` to each record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = request_id_var.get("") or "-"
        return True


def route_template(request: Request) -> str:
    """Path template of the route that handled `request`, else the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, route, status and duration for every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        # The router records the matched route on the shared scope.
        route = route_template(request)
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms",
            request.method,
            route,
            response.status_code,
            elapsed_ms,
            extra={
                "route": route,
                "path_params": dict(request.path_params),
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
                "client_ip": request.client.host if request.client else "unknown",
            },
        )
        return response
