"""
Market repository implementation using SQLAlchemy.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from talardnad.domain.entities.market import Market, MarketWithProvider
from talardnad.domain.exceptions import RepositoryError
from talardnad.domain.repositories.i_market_repository import IMarketRepository
from talardnad.infrastructure.persistence.errors import translate_write_error
from talardnad.infrastructure.persistence.models import MarketModel
from talardnad.infrastructure.persistence.repositories.provider_repository import (
    ProviderRepository,
)


class MarketRepository(IMarketRepository):
    """
    SQLAlchemy implementation of market repository.

    create() commits its own transaction: a market that was written stays
    written even if the rest of the request fails afterwards.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, market: Market) -> Market:
        """
        Create and commit a new market.

        Args:
            market: Market entity with application-generated ID

        Returns:
            Created market entity

        Raises:
            DuplicateEntityError: If name violates the unique constraint
            RepositoryError: If the write fails for any other reason
        """
        model = MarketModel(
            id=market.id,
            provider_id=market.provider_id,
            name=market.name,
            address=market.address,
            description=market.description,
            image=market.image,
            open_time=market.open_time,
            close_time=market.close_time,
            latitude=market.latitude,
            longitude=market.longitude,
            created_at=market.created_at,
        )

        self.session.add(model)
        try:
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise translate_write_error(e, "Market", f"name '{market.name}'") from e

        return self._to_entity(model)

    async def get_by_id(self, market_id: UUID) -> Optional[Market]:
        stmt = select(MarketModel).where(MarketModel.id == market_id)
        model = await self._scalar(stmt, "market lookup")
        return self._to_entity(model) if model else None

    async def get_by_name(self, name: str) -> Optional[Market]:
        stmt = select(MarketModel).where(MarketModel.name == name)
        model = await self._scalar(stmt, "market lookup")
        return self._to_entity(model) if model else None

    async def get_with_provider_by_id(
        self, market_id: UUID
    ) -> Optional[MarketWithProvider]:
        """
        Get market with provider eager loaded.

        Args:
            market_id: Market unique identifier

        Returns:
            MarketWithProvider if found, None otherwise
        """
        stmt = (
            select(MarketModel)
            .where(MarketModel.id == market_id)
            .options(selectinload(MarketModel.provider))
        )
        model = await self._scalar(stmt, "market details lookup")
        if model is None:
            return None

        return MarketWithProvider(
            market=self._to_entity(model),
            provider=ProviderRepository._to_entity(model.provider),
        )

    async def list_by_provider(self, provider_id: UUID) -> List[Market]:
        stmt = (
            select(MarketModel)
            .where(MarketModel.provider_id == provider_id)
            .order_by(MarketModel.name)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def _scalar(self, stmt, operation: str) -> Optional[MarketModel]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryError(operation, str(e)) from e
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: MarketModel) -> Market:
        """Convert SQLAlchemy model to domain entity."""
        return Market(
            id=model.id,
            provider_id=model.provider_id,
            name=model.name,
            address=model.address,
            description=model.description,
            image=model.image,
            open_time=model.open_time,
            close_time=model.close_time,
            latitude=model.latitude,
            longitude=model.longitude,
            created_at=model.created_at,
        )
