"""
Provider repository implementation using SQLAlchemy.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from talardnad.domain.entities.provider import Provider
from talardnad.domain.repositories.i_provider_repository import (
    IProviderRepository,
)
from talardnad.infrastructure.persistence.errors import translate_write_error
from talardnad.infrastructure.persistence.models import ProviderModel


class ProviderRepository(IProviderRepository):
    """SQLAlchemy implementation of provider repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, provider: Provider) -> Provider:
        """
        Create and commit a new provider.

        Raises:
            DuplicateEntityError: If provider name is taken
        """
        model = ProviderModel(
            id=provider.id,
            name=provider.name,
            owner_id=provider.owner_id,
            email=provider.email,
            phone=provider.phone,
            created_at=provider.created_at,
        )

        self.session.add(model)
        try:
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise translate_write_error(
                e, "Provider", f"name '{provider.name}'"
            ) from e

        return self._to_entity(model)

    async def get_by_id(self, provider_id: UUID) -> Optional[Provider]:
        stmt = select(ProviderModel).where(ProviderModel.id == provider_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Optional[Provider]:
        stmt = select(ProviderModel).where(ProviderModel.name == name)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: ProviderModel) -> Provider:
        return Provider(
            id=model.id,
            name=model.name,
            owner_id=model.owner_id,
            email=model.email,
            phone=model.phone,
            created_at=model.created_at,
        )
