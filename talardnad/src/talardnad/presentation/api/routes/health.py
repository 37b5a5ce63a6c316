"""
Health check API routes.
"""

from fastapi import APIRouter, Depends, Response, status

from talardnad.di.container import DIContainer
from talardnad.di.dependencies import get_container

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(
    response: Response,
    container: DIContainer = Depends(get_container),
):
    """
    Readiness check.

    Returns 200 when the database answers, 503 otherwise.
    """
    database_ok = await container.database.health_check()

    if not database_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if database_ok else "unhealthy",
        "service": container.settings.APP_NAME.lower(),
        "version": container.settings.APP_VERSION,
        "checks": {"database": "ok" if database_ok else "unavailable"},
    }
