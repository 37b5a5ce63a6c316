"""
Get Market use case.
"""

from dataclasses import dataclass
from typing import List
from uuid import UUID

from talardnad.domain.entities.market import Market, MarketWithProvider
from talardnad.domain.exceptions import EntityNotFoundError, ProviderNotFoundError
from talardnad.domain.repositories.i_market_repository import IMarketRepository
from talardnad.domain.repositories.i_provider_repository import (
    IProviderRepository,
)


@dataclass
class GetMarketCommand:
    """Command to get market details."""

    market_id: UUID


class GetMarket:
    """Get a market with its provider."""

    def __init__(self, market_repository: IMarketRepository):
        self.market_repository = market_repository

    async def execute(self, command: GetMarketCommand) -> MarketWithProvider:
        """
        Get market by ID.

        Raises:
            EntityNotFoundError: If market does not exist
        """
        market = await self.market_repository.get_with_provider_by_id(
            command.market_id
        )
        if market is None:
            raise EntityNotFoundError("Market", str(command.market_id))
        return market


class ListProviderMarkets:
    """List markets owned by a provider."""

    def __init__(
        self,
        market_repository: IMarketRepository,
        provider_repository: IProviderRepository,
    ):
        self.market_repository = market_repository
        self.provider_repository = provider_repository

    async def execute(self, provider_id: UUID) -> List[Market]:
        """
        List markets for provider.

        Raises:
            ProviderNotFoundError: If provider does not exist
        """
        provider = await self.provider_repository.get_by_id(provider_id)
        if provider is None:
            raise ProviderNotFoundError(provider_id)
        return await self.market_repository.list_by_provider(provider_id)
