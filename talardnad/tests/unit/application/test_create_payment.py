"""
Unit tests for payment use cases.

Usage:
    pytest talardnad/tests/unit/application/test_create_payment.py
"""

from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from shared.tests import ComponentTest
from talardnad.application.use_cases.create_payment import (
    CreatePayment,
    CreatePaymentCommand,
    GetPayment,
)
from talardnad.domain.entities.market import Market
from talardnad.domain.entities.payment import Payment, PaymentStatus
from talardnad.domain.entities.user import User
from talardnad.domain.exceptions import (
    EntityNotFoundError,
    ErrorKind,
    ForbiddenError,
    PaymentGatewayError,
    ValidationError,
)
from talardnad.domain.services.i_payment_gateway import GatewayChargeResult


class TestCreatePayment(ComponentTest):
    """Unit tests for CreatePayment and GetPayment."""

    component_name = "talardnad"
    test_category = "unit"

    def setup_test(self):
        self.user = User(username="somchai", email="somchai@example.com")
        self.payment_repo = AsyncMock()
        self.payment_repo.create.side_effect = lambda payment: payment
        self.user_repo = AsyncMock()
        self.user_repo.get_by_id.return_value = self.user
        self.market_repo = AsyncMock()
        self.gateway = AsyncMock()
        self.gateway.charge.return_value = GatewayChargeResult(
            reference="ch_123", succeeded=True
        )

        self.use_case = CreatePayment(
            payment_repository=self.payment_repo,
            user_repository=self.user_repo,
            market_repository=self.market_repo,
            payment_gateway=self.gateway,
        )

    async def test_successful_charge_is_recorded(self):
        """Test a succeeded charge is persisted with its reference."""
        self.reporter.info("Testing successful payment", context="Test")

        payment = await self.use_case.execute(
            CreatePaymentCommand(
                user_id=self.user.id, amount=Decimal("150.00"), currency="thb"
            )
        )

        assert payment.status == PaymentStatus.SUCCEEDED
        assert payment.gateway_reference == "ch_123"
        assert payment.currency == "THB"

        charge = self.gateway.charge.call_args.args[0]
        assert charge.payment_id == payment.id
        assert charge.amount == Decimal("150.00")
        self.payment_repo.create.assert_awaited_once()

    async def test_declined_charge_is_recorded_as_failed(self):
        """Test a declined charge is still persisted."""
        self.gateway.charge.return_value = GatewayChargeResult(
            reference="ch_456", succeeded=False, failure_reason="card_declined"
        )

        payment = await self.use_case.execute(
            CreatePaymentCommand(user_id=self.user.id, amount=Decimal("10"))
        )

        assert payment.status == PaymentStatus.FAILED
        assert payment.gateway_reference == "ch_456"
        self.payment_repo.create.assert_awaited_once()

    async def test_gateway_error_persists_nothing(self):
        """Test a gateway error propagates as UPSTREAM."""
        self.gateway.charge.side_effect = PaymentGatewayError("HTTP 503")

        with pytest.raises(PaymentGatewayError) as exc_info:
            await self.use_case.execute(
                CreatePaymentCommand(user_id=self.user.id, amount=Decimal("10"))
            )

        assert exc_info.value.kind == ErrorKind.UPSTREAM
        self.payment_repo.create.assert_not_awaited()

    async def test_unknown_market(self):
        """Test payment for unknown market is NOT_FOUND."""
        self.market_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await self.use_case.execute(
                CreatePaymentCommand(
                    user_id=self.user.id, amount=Decimal("10"), market_id=uuid4()
                )
            )

        self.gateway.charge.assert_not_awaited()

    async def test_known_market(self):
        """Test market reference is carried on the payment."""
        market = Market(provider_id=uuid4(), name="Floating Market")
        self.market_repo.get_by_id.return_value = market

        payment = await self.use_case.execute(
            CreatePaymentCommand(
                user_id=self.user.id, amount=Decimal("10"), market_id=market.id
            )
        )

        assert payment.market_id == market.id

    async def test_invalid_currency_is_validation_error(self):
        """Test bad currency never reaches the gateway."""
        with pytest.raises(ValidationError):
            await self.use_case.execute(
                CreatePaymentCommand(
                    user_id=self.user.id, amount=Decimal("10"), currency="B1"
                )
            )

        self.gateway.charge.assert_not_awaited()

    async def test_unknown_user(self):
        """Test payment for unknown user is NOT_FOUND."""
        self.user_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await self.use_case.execute(
                CreatePaymentCommand(user_id=uuid4(), amount=Decimal("10"))
            )

    async def test_get_payment_of_other_user_forbidden(self):
        """Test payments are only visible to their owner."""
        payment = Payment(user_id=uuid4(), amount=Decimal("10"))
        self.payment_repo.get_by_id.return_value = payment

        with pytest.raises(ForbiddenError):
            await GetPayment(self.payment_repo).execute(payment.id, uuid4())

        result = await GetPayment(self.payment_repo).execute(
            payment.id, payment.user_id
        )
        assert result is payment

    async def test_get_payment_not_found(self):
        """Test unknown payment is NOT_FOUND."""
        self.payment_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await GetPayment(self.payment_repo).execute(uuid4(), uuid4())


if __name__ == "__main__":
    TestCreatePayment.run_as_main()
