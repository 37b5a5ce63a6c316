"""
Prometheus metrics middleware for FastAPI.
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from talardnad.infrastructure.monitoring import metrics


def _endpoint(request: Request) -> str:
    """Route template (e.g. /api/v1/markets/{market_id}), else raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Middleware to collect HTTP metrics.

    Records:
    - Request count by method/endpoint/status
    - Request duration by method/endpoint
    - Error count by method/endpoint/type
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        method = request.method
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            endpoint = _endpoint(request)
            metrics.http_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint,
            ).observe(time.time() - start_time)
            metrics.http_errors_total.labels(
                method=method,
                endpoint=endpoint,
                error_type=type(e).__name__,
            ).inc()
            raise

        endpoint = _endpoint(request)
        metrics.http_request_duration_seconds.labels(
            method=method,
            endpoint=endpoint,
        ).observe(time.time() - start_time)

        metrics.http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status=response.status_code,
        ).inc()

        if response.status_code >= 400:
            error_type = (
                "client_error" if response.status_code < 500 else "server_error"
            )
            metrics.http_errors_total.labels(
                method=method,
                endpoint=endpoint,
                error_type=error_type,
            ).inc()

        return response
