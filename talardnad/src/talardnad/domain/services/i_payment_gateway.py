"""
Payment Gateway interface.

Defines contract for charging users through an external payment provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class PaymentCharge:
    """Charge request sent to the gateway."""

    payment_id: UUID
    user_id: UUID
    amount: Decimal
    currency: str
    description: Optional[str] = None


@dataclass(frozen=True)
class GatewayChargeResult:
    """Gateway answer for a charge."""

    reference: str
    succeeded: bool
    failure_reason: Optional[str] = None


class IPaymentGateway(ABC):
    """
    Interface for the external payment gateway.

    The gateway is opaque: the domain only knows whether a charge
    succeeded and the reference the gateway assigned to it.
    """

    @abstractmethod
    async def charge(self, charge: PaymentCharge) -> GatewayChargeResult:
        """
        Charge the given amount.

        Args:
            charge: Charge details (payment ID doubles as idempotency key)

        Returns:
            GatewayChargeResult with reference and outcome

        Raises:
            PaymentGatewayError: If the gateway cannot be reached or errors
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""
