"""
Provider use cases.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from talardnad.domain.entities.provider import Provider
from talardnad.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from talardnad.domain.repositories.i_provider_repository import (
    IProviderRepository,
)


@dataclass
class CreateProviderCommand:
    """Command to register a provider."""

    owner_id: UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


class CreateProvider:
    """
    Register a new provider owned by the requesting user.

    Business rules:
    - Provider name must be unique
    """

    def __init__(self, provider_repository: IProviderRepository):
        """
        Initialize use case with dependencies.

        Args:
            provider_repository: Repository for provider persistence
        """
        self.provider_repository = provider_repository

    async def execute(self, command: CreateProviderCommand) -> Provider:
        """
        Execute provider creation.

        Raises:
            DuplicateEntityError: If a provider with that name exists
        """
        existing = await self.provider_repository.get_by_name(command.name)
        if existing:
            raise DuplicateEntityError("Provider", f"name '{command.name}'")

        provider = Provider(
            id=uuid4(),
            name=command.name,
            owner_id=command.owner_id,
            email=command.email,
            phone=command.phone,
        )

        return await self.provider_repository.create(provider)


class GetProvider:
    """Get provider by ID."""

    def __init__(self, provider_repository: IProviderRepository):
        self.provider_repository = provider_repository

    async def execute(self, provider_id: UUID) -> Provider:
        """
        Raises:
            EntityNotFoundError: If provider does not exist
        """
        provider = await self.provider_repository.get_by_id(provider_id)
        if provider is None:
            raise EntityNotFoundError("Provider", str(provider_id))
        return provider
