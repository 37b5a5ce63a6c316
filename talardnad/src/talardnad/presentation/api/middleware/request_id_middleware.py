"""
Request ID middleware for request tracking.
"""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from talardnad.infrastructure.monitoring.logger import (
    get_request_id,
    set_request_id,
)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and track request IDs.

    Reuses an incoming X-Request-ID header, otherwise generates one, and
    echoes it on the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        set_request_id(request.headers.get("X-Request-ID"))

        response = await call_next(request)

        response.headers["X-Request-ID"] = get_request_id() or ""

        return response
