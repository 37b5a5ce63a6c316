"""
Payment repository implementation using SQLAlchemy.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from talardnad.domain.entities.payment import Payment, PaymentStatus
from talardnad.domain.repositories.i_payment_repository import (
    IPaymentRepository,
)
from talardnad.infrastructure.persistence.errors import translate_write_error
from talardnad.infrastructure.persistence.models import PaymentModel


class PaymentRepository(IPaymentRepository):
    """SQLAlchemy implementation of payment repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        """
        Create and commit a new payment record.

        Args:
            payment: Payment entity with gateway outcome applied

        Returns:
            Created payment entity

        Raises:
            RepositoryError: If the write fails
        """
        model = PaymentModel(
            id=payment.id,
            user_id=payment.user_id,
            market_id=payment.market_id,
            amount=payment.amount,
            currency=payment.currency,
            status=payment.status.value,
            gateway_reference=payment.gateway_reference,
            description=payment.description,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )

        self.session.add(model)
        try:
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise translate_write_error(e, "Payment", f"id '{payment.id}'") from e

        return self._to_entity(model)

    async def get_by_id(self, payment_id: UUID) -> Optional[Payment]:
        stmt = select(PaymentModel).where(PaymentModel.id == payment_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    def _to_entity(self, model: PaymentModel) -> Payment:
        """
        Convert SQLAlchemy model to domain entity.

        Args:
            model: PaymentModel instance

        Returns:
            Payment entity
        """
        return Payment(
            id=model.id,
            user_id=model.user_id,
            market_id=model.market_id,
            amount=model.amount,
            currency=model.currency,
            status=PaymentStatus(model.status),
            gateway_reference=model.gateway_reference,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
