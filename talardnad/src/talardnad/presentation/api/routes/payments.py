"""
Payment API routes.

- POST /payments - Charge current user through the gateway
- GET /payments/{payment_id} - Own payment details
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from talardnad.application.use_cases.create_payment import (
    CreatePayment,
    CreatePaymentCommand,
    GetPayment,
)
from talardnad.di.dependencies import get_create_payment, get_get_payment
from talardnad.domain.entities.user import User
from talardnad.infrastructure.monitoring import metrics
from talardnad.presentation.api.middleware.auth import get_current_user
from talardnad.presentation.schemas.payment_schemas import (
    CreatePaymentRequest,
    PaymentResponse,
)

router = APIRouter(prefix="/payments", tags=["Payments"])


@router.post(
    "",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create payment",
)
async def create_payment(
    request: CreatePaymentRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreatePayment = Depends(get_create_payment),
) -> PaymentResponse:
    """
    Charge the authenticated user.

    A declined charge is still recorded (status "failed").

    Errors:
    - 404 if market does not exist
    - 502 if the gateway is unreachable or errors
    """
    payment = await use_case.execute(
        CreatePaymentCommand(
            user_id=current_user.id,
            amount=request.amount,
            currency=request.currency,
            market_id=request.market_id,
            description=request.description,
        )
    )
    metrics.payments_total.labels(status=payment.status.value).inc()

    return PaymentResponse.from_entity(payment)


@router.get(
    "/{payment_id}",
    response_model=PaymentResponse,
    summary="Get payment",
)
async def get_payment(
    payment_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: GetPayment = Depends(get_get_payment),
) -> PaymentResponse:
    """
    Get own payment.

    Errors:
    - 404 if payment not found
    - 403 if payment belongs to another user
    """
    payment = await use_case.execute(payment_id, requester_id=current_user.id)
    return PaymentResponse.from_entity(payment)
