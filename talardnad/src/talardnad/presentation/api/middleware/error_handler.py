"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from talardnad.domain.exceptions import ErrorKind, TalardnadException
from talardnad.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.UPSTREAM: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def talardnad_exception_handler(
    request: Request, exc: TalardnadException
) -> JSONResponse:
    """
    Handle Talardnad domain exceptions.

    Status comes from the exception kind, never from its message.
    """
    status_code = STATUS_BY_KIND.get(
        exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}"
        )

    headers = None
    if exc.kind == ErrorKind.UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "kind": exc.kind.value,
            "message": exc.message,
        },
        headers=headers,
    )
