"""
Dependency Injection Container for Talardnad.

Manages all service instances and their dependencies.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from talardnad.config.settings import Settings
from talardnad.domain.repositories.i_market_repository import IMarketRepository
from talardnad.domain.repositories.i_payment_repository import (
    IPaymentRepository,
)
from talardnad.domain.repositories.i_provider_repository import (
    IProviderRepository,
)
from talardnad.domain.repositories.i_user_repository import IUserRepository
from talardnad.domain.services.i_password_hasher import IPasswordHasher
from talardnad.domain.services.i_payment_gateway import IPaymentGateway
from talardnad.infrastructure.auth.jwt_handler import JWTHandler
from talardnad.infrastructure.auth.password_hasher import BcryptPasswordHasher
from talardnad.infrastructure.payments.http_payment_gateway import (
    HttpPaymentGateway,
)
from talardnad.infrastructure.persistence.database import Database
from talardnad.infrastructure.persistence.repositories.market_repository import (
    MarketRepository,
)
from talardnad.infrastructure.persistence.repositories.payment_repository import (
    PaymentRepository,
)
from talardnad.infrastructure.persistence.repositories.provider_repository import (
    ProviderRepository,
)
from talardnad.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)


class DIContainer:
    """
    Dependency Injection Container.

    Owns the process-wide services (database, gateway client, auth
    helpers) for one application instance. Repositories are
    session-scoped and built per request.
    """

    def __init__(
        self,
        settings: Settings,
        payment_gateway: Optional[IPaymentGateway] = None,
    ):
        """
        Initialize container.

        Args:
            settings: Application settings
            payment_gateway: Optional gateway override (tests)
        """
        self.settings = settings

        # Infrastructure
        self._database: Optional[Database] = None

        # Domain Services
        self._payment_gateway: Optional[IPaymentGateway] = payment_gateway
        self._password_hasher: Optional[IPasswordHasher] = None
        self._jwt_handler: Optional[JWTHandler] = None

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        await self.database.connect()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._database:
            await self._database.disconnect()

        if self._payment_gateway:
            await self._payment_gateway.close()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
                pool_size=self.settings.DATABASE_POOL_SIZE,
                max_overflow=self.settings.DATABASE_MAX_OVERFLOW,
            )
        return self._database

    # Domain Service Getters

    @property
    def payment_gateway(self) -> IPaymentGateway:
        """Get payment gateway client instance."""
        if self._payment_gateway is None:
            self._payment_gateway = HttpPaymentGateway(
                base_url=self.settings.PAYMENT_GATEWAY_URL,
                api_key=self.settings.PAYMENT_GATEWAY_API_KEY,
                timeout=self.settings.PAYMENT_GATEWAY_TIMEOUT,
            )
        return self._payment_gateway

    @property
    def password_hasher(self) -> IPasswordHasher:
        """Get password hasher instance."""
        if self._password_hasher is None:
            self._password_hasher = BcryptPasswordHasher(
                rounds=self.settings.BCRYPT_ROUNDS
            )
        return self._password_hasher

    @property
    def jwt_handler(self) -> JWTHandler:
        """Get JWT handler instance."""
        if self._jwt_handler is None:
            self._jwt_handler = JWTHandler(
                secret_key=self.settings.JWT_SECRET_KEY,
                algorithm=self.settings.JWT_ALGORITHM,
                expiration_hours=self.settings.JWT_EXPIRATION_HOURS,
            )
        return self._jwt_handler

    # Repository Getters (Session-scoped)

    def get_user_repository(self, session: AsyncSession) -> IUserRepository:
        """Get user repository bound to session."""
        return UserRepository(session)

    def get_provider_repository(self, session: AsyncSession) -> IProviderRepository:
        """Get provider repository bound to session."""
        return ProviderRepository(session)

    def get_market_repository(self, session: AsyncSession) -> IMarketRepository:
        """Get market repository bound to session."""
        return MarketRepository(session)

    def get_payment_repository(self, session: AsyncSession) -> IPaymentRepository:
        """Get payment repository bound to session."""
        return PaymentRepository(session)
