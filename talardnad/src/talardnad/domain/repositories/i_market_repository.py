"""
Market repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from talardnad.domain.entities.market import Market, MarketWithProvider


class IMarketRepository(ABC):
    """Interface for market persistence operations."""

    @abstractmethod
    async def create(self, market: Market) -> Market:
        """
        Create new market.

        Args:
            market: Market entity with application-generated ID

        Returns:
            Created market entity

        Raises:
            DuplicateEntityError: If the name violates the unique constraint
            RepositoryError: If the write fails for any other reason
        """

    @abstractmethod
    async def get_by_id(self, market_id: UUID) -> Optional[Market]:
        """
        Get market by ID.

        Args:
            market_id: Market unique identifier

        Returns:
            Market entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Market]:
        """
        Get market by its unique name.

        Args:
            name: Market name

        Returns:
            Market entity if found, None otherwise
        """

    @abstractmethod
    async def get_with_provider_by_id(
        self, market_id: UUID
    ) -> Optional[MarketWithProvider]:
        """
        Get market joined with its provider.

        Args:
            market_id: Market unique identifier

        Returns:
            MarketWithProvider if found, None otherwise
        """

    @abstractmethod
    async def list_by_provider(self, provider_id: UUID) -> List[Market]:
        """
        List markets owned by a provider, ordered by name.

        Args:
            provider_id: Provider unique identifier

        Returns:
            List of markets (empty if none)
        """
