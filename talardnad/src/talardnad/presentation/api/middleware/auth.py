"""
Authentication dependencies for JWT bearer tokens.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from talardnad.di.container import DIContainer
from talardnad.di.dependencies import get_container, get_db_session
from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import AuthenticationError

# Missing header is reported through the domain error, not FastAPI's default
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> User:
    """
    Extract and load current authenticated user from JWT token.

    Args:
        credentials: HTTP Authorization header with Bearer token
        session: Database session from dependency injection
        container: Application DI container

    Returns:
        User domain entity

    Raises:
        AuthenticationError: If header is missing, token is invalid or
            expired, or the user no longer exists
    """
    if credentials is None:
        raise AuthenticationError("Missing bearer token")

    user_id = container.jwt_handler.extract_user_id(credentials.credentials)

    user = await container.get_user_repository(session).get_by_id(user_id)
    if not user:
        raise AuthenticationError("User not found")

    return user

