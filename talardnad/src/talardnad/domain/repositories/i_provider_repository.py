"""
Provider repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from talardnad.domain.entities.provider import Provider


class IProviderRepository(ABC):
    """Interface for provider persistence operations."""

    @abstractmethod
    async def create(self, provider: Provider) -> Provider:
        """
        Create new provider.

        Raises:
            DuplicateEntityError: If provider name is already taken
        """

    @abstractmethod
    async def get_by_id(self, provider_id: UUID) -> Optional[Provider]:
        """Get provider by ID, None if not found."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Provider]:
        """Get provider by name, None if not found."""
