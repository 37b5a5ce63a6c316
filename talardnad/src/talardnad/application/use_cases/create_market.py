"""
Create Market use case.

Guarded create: a market is written only after its provider is known to
exist and its name is known to be free, then read back with the provider
joined in.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from talardnad.domain.entities.market import Market, MarketWithProvider
from talardnad.domain.exceptions import (
    DuplicateEntityError,
    InternalError,
    MarketAlreadyExistsError,
    MarketDetailsUnavailableError,
    ProviderNotFoundError,
    TalardnadException,
    is_not_found,
)
from talardnad.domain.repositories.i_market_repository import IMarketRepository
from talardnad.domain.repositories.i_provider_repository import (
    IProviderRepository,
)
from talardnad.infrastructure.monitoring import metrics

logger = logging.getLogger(__name__)


@dataclass
class CreateMarketCommand:
    """Command to create market."""

    provider_id: UUID
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    open_time: Optional[str] = None
    close_time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


def map_market_command(command: CreateMarketCommand) -> Market:
    """
    Map a create command to a new Market entity.

    Generates a fresh identifier; every other field is copied as-is.
    """
    return Market(
        id=uuid4(),
        provider_id=command.provider_id,
        name=command.name,
        address=command.address,
        description=command.description,
        image=command.image,
        open_time=command.open_time,
        close_time=command.close_time,
        latitude=command.latitude,
        longitude=command.longitude,
    )


class CreateMarket:
    """
    Use case for creating a market under an existing provider.

    Flow:
    1. Check provider exists (NOT_FOUND otherwise)
    2. Check no market has the same name (CONFLICT otherwise)
    3. Map command to entity with a generated ID
    4. Persist market
    5. Re-read market joined with provider

    Every step fails closed: an unexpected error from a repository is
    wrapped as INTERNAL with the underlying message and never retried.
    A unique-constraint violation at step 4 is reported as CONFLICT.
    """

    def __init__(
        self,
        market_repository: IMarketRepository,
        provider_repository: IProviderRepository,
    ):
        """
        Initialize use case.

        Args:
            market_repository: Market persistence
            provider_repository: Provider lookups
        """
        self.market_repository = market_repository
        self.provider_repository = provider_repository

    async def execute(self, command: CreateMarketCommand) -> MarketWithProvider:
        """
        Create market and return it with provider details.

        Args:
            command: Market details

        Returns:
            Created market joined with its provider

        Raises:
            ProviderNotFoundError: Provider does not exist
            MarketAlreadyExistsError: Name already taken
            MarketDetailsUnavailableError: Market saved but read-back failed
            InternalError: Any other repository failure
        """
        try:
            created = await self._create(command)
        except TalardnadException as e:
            metrics.market_create_total.labels(outcome=e.kind.value).inc()
            raise
        metrics.market_create_total.labels(outcome="CREATED").inc()
        return created

    async def _create(self, command: CreateMarketCommand) -> MarketWithProvider:
        await self._ensure_provider_exists(command.provider_id)
        await self._ensure_name_available(command.name)

        market = map_market_command(command)

        try:
            await self.market_repository.create(market)
        except DuplicateEntityError:
            # Lost the race against a concurrent create with the same name
            raise MarketAlreadyExistsError(command.name)
        except Exception as e:
            raise InternalError(
                f"Failed to create market: {_describe(e)}",
                code="MARKET_CREATE_FAILED",
            ) from e

        try:
            created = await self.market_repository.get_with_provider_by_id(market.id)
        except Exception as e:
            logger.error(
                f"Market {market.id} saved but could not be read back",
                exc_info=True,
            )
            raise MarketDetailsUnavailableError(market.id, _describe(e)) from e

        if created is None:
            logger.error(f"Market {market.id} saved but not found on read back")
            raise MarketDetailsUnavailableError(market.id, "market not found")

        return created

    async def _ensure_provider_exists(self, provider_id: UUID) -> None:
        try:
            provider = await self.provider_repository.get_by_id(provider_id)
        except Exception as e:
            if is_not_found(e):
                raise ProviderNotFoundError(provider_id) from e
            raise InternalError(
                f"Failed to check provider existence: {_describe(e)}",
                code="PROVIDER_LOOKUP_FAILED",
            ) from e

        if provider is None:
            raise ProviderNotFoundError(provider_id)

    async def _ensure_name_available(self, name: str) -> None:
        try:
            existing = await self.market_repository.get_by_name(name)
        except Exception as e:
            if is_not_found(e):
                return
            raise InternalError(
                f"Failed to check market existence: {_describe(e)}",
                code="MARKET_LOOKUP_FAILED",
            ) from e

        if existing is not None:
            raise MarketAlreadyExistsError(name)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, TalardnadException):
        return exc.message
    return str(exc) or type(exc).__name__

