"""
Payment use cases.

Charges go through the external payment gateway; a payment row is only
written once the gateway has answered.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from talardnad.domain.entities.payment import Payment
from talardnad.domain.exceptions import (
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)
from talardnad.domain.repositories.i_market_repository import IMarketRepository
from talardnad.domain.repositories.i_payment_repository import (
    IPaymentRepository,
)
from talardnad.domain.repositories.i_user_repository import IUserRepository
from talardnad.domain.services.i_payment_gateway import (
    IPaymentGateway,
    PaymentCharge,
)

logger = logging.getLogger(__name__)


@dataclass
class CreatePaymentCommand:
    """Command to create payment."""

    user_id: UUID
    amount: Decimal
    currency: str = "THB"
    market_id: Optional[UUID] = None
    description: Optional[str] = None


class CreatePayment:
    """
    Use case for charging a user.

    Flow:
    1. Validate user and (optional) market exist
    2. Build pending payment
    3. Charge through gateway
    4. Record outcome and persist
    """

    def __init__(
        self,
        payment_repository: IPaymentRepository,
        user_repository: IUserRepository,
        market_repository: IMarketRepository,
        payment_gateway: IPaymentGateway,
    ):
        """
        Initialize use case.

        Args:
            payment_repository: Payment persistence
            user_repository: User lookups
            market_repository: Market lookups
            payment_gateway: External payment gateway
        """
        self.payment_repository = payment_repository
        self.user_repository = user_repository
        self.market_repository = market_repository
        self.payment_gateway = payment_gateway

    async def execute(self, command: CreatePaymentCommand) -> Payment:
        """
        Create payment.

        Returns:
            Persisted payment, succeeded or failed per gateway answer

        Raises:
            EntityNotFoundError: If user or market not found
            ValidationError: If amount or currency is invalid
            PaymentGatewayError: If gateway call fails (nothing persisted)
        """
        user = await self.user_repository.get_by_id(command.user_id)
        if not user:
            raise EntityNotFoundError("User", str(command.user_id))

        if command.market_id is not None:
            market = await self.market_repository.get_by_id(command.market_id)
            if not market:
                raise EntityNotFoundError("Market", str(command.market_id))

        try:
            payment = Payment(
                id=uuid4(),
                user_id=command.user_id,
                market_id=command.market_id,
                amount=command.amount,
                currency=command.currency,
                description=command.description,
            )
        except ValueError as e:
            raise ValidationError(field="payment", reason=str(e)) from e

        result = await self.payment_gateway.charge(
            PaymentCharge(
                payment_id=payment.id,
                user_id=payment.user_id,
                amount=payment.amount,
                currency=payment.currency,
                description=payment.description,
            )
        )

        if result.succeeded:
            payment.mark_succeeded(result.reference)
        else:
            logger.warning(
                f"Payment {payment.id} declined by gateway: {result.failure_reason}"
            )
            payment.mark_failed(result.reference)

        return await self.payment_repository.create(payment)


class GetPayment:
    """Use case for reading a payment owned by the requester."""

    def __init__(self, payment_repository: IPaymentRepository):
        self.payment_repository = payment_repository

    async def execute(self, payment_id: UUID, requester_id: UUID) -> Payment:
        """
        Get payment.

        Raises:
            EntityNotFoundError: If payment not found
            ForbiddenError: If requester does not own the payment
        """
        payment = await self.payment_repository.get_by_id(payment_id)
        if not payment:
            raise EntityNotFoundError("Payment", str(payment_id))

        if payment.user_id != requester_id:
            raise ForbiddenError("You are not authorized to view this payment")

        return payment
