"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container stored on
the application state.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from talardnad.application.use_cases.create_market import CreateMarket
from talardnad.application.use_cases.create_payment import (
    CreatePayment,
    GetPayment,
)
from talardnad.application.use_cases.create_provider import (
    CreateProvider,
    GetProvider,
)
from talardnad.application.use_cases.get_market import (
    GetMarket,
    ListProviderMarkets,
)
from talardnad.application.use_cases.login_user import LoginUser
from talardnad.application.use_cases.register_user import RegisterUser
from talardnad.application.use_cases.user_profile import (
    DeleteUser,
    GetUserProfile,
    UpdateUserProfile,
)
from talardnad.di.container import DIContainer
from talardnad.infrastructure.auth.jwt_handler import JWTHandler

# ================================================================
# Container and Database Dependencies
# ================================================================


def get_container(request: Request) -> DIContainer:
    """Get the DI container of the application serving this request."""
    return request.app.state.container


async def get_db_session(
    container: DIContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    One session per request. Repositories commit their own writes, so
    nothing is left to commit once the response has been sent.
    """
    async with container.database.session() as session:
        yield session


def get_jwt_handler(container: DIContainer = Depends(get_container)) -> JWTHandler:
    """Get JWT handler dependency."""
    return container.jwt_handler


# ================================================================
# Use Case Dependencies - Users
# ================================================================


def get_register_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> RegisterUser:
    """Get RegisterUser use case dependency."""
    return RegisterUser(
        user_repository=container.get_user_repository(session),
        password_hasher=container.password_hasher,
    )


def get_login_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> LoginUser:
    """Get LoginUser use case dependency."""
    return LoginUser(
        user_repository=container.get_user_repository(session),
        password_hasher=container.password_hasher,
    )


def get_get_user_profile(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetUserProfile:
    """Get GetUserProfile use case dependency."""
    return GetUserProfile(user_repository=container.get_user_repository(session))


def get_update_user_profile(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> UpdateUserProfile:
    """Get UpdateUserProfile use case dependency."""
    return UpdateUserProfile(user_repository=container.get_user_repository(session))


def get_delete_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> DeleteUser:
    """Get DeleteUser use case dependency."""
    return DeleteUser(user_repository=container.get_user_repository(session))


# ================================================================
# Use Case Dependencies - Providers and Markets
# ================================================================


def get_create_provider(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CreateProvider:
    """Get CreateProvider use case dependency."""
    return CreateProvider(
        provider_repository=container.get_provider_repository(session)
    )


def get_get_provider(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetProvider:
    """Get GetProvider use case dependency."""
    return GetProvider(provider_repository=container.get_provider_repository(session))


def get_create_market(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CreateMarket:
    """Get CreateMarket use case dependency."""
    return CreateMarket(
        market_repository=container.get_market_repository(session),
        provider_repository=container.get_provider_repository(session),
    )


def get_get_market(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetMarket:
    """Get GetMarket use case dependency."""
    return GetMarket(market_repository=container.get_market_repository(session))


def get_list_provider_markets(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> ListProviderMarkets:
    """Get ListProviderMarkets use case dependency."""
    return ListProviderMarkets(
        market_repository=container.get_market_repository(session),
        provider_repository=container.get_provider_repository(session),
    )


# ================================================================
# Use Case Dependencies - Payments
# ================================================================


def get_create_payment(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CreatePayment:
    """Get CreatePayment use case dependency."""
    return CreatePayment(
        payment_repository=container.get_payment_repository(session),
        user_repository=container.get_user_repository(session),
        market_repository=container.get_market_repository(session),
        payment_gateway=container.payment_gateway,
    )


def get_get_payment(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetPayment:
    """Get GetPayment use case dependency."""
    return GetPayment(payment_repository=container.get_payment_repository(session))
