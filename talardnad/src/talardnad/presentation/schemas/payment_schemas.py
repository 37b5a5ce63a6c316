"""
Payment API schemas.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from talardnad.domain.entities.payment import Payment


class CreatePaymentRequest(BaseModel):
    """Request to charge the authenticated user."""

    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    currency: str = Field(default="THB", min_length=3, max_length=3)
    market_id: Optional[UUID] = None
    description: Optional[str] = Field(None, max_length=500)


class PaymentResponse(BaseModel):
    """Payment details."""

    id: str
    user_id: str
    market_id: Optional[str] = None
    amount: str = Field(..., description="Decimal amount as string")
    currency: str
    status: str
    gateway_reference: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            id=str(payment.id),
            user_id=str(payment.user_id),
            market_id=str(payment.market_id) if payment.market_id else None,
            amount=str(payment.amount),
            currency=payment.currency,
            status=payment.status.value,
            gateway_reference=payment.gateway_reference,
            description=payment.description,
            created_at=payment.created_at,
            updated_at=payment.updated_at,
        )
