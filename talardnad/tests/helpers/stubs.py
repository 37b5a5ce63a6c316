"""
In-memory stand-ins for external services.
"""

from typing import List, Optional
from uuid import uuid4

from talardnad.domain.exceptions import PaymentGatewayError
from talardnad.domain.services.i_payment_gateway import (
    GatewayChargeResult,
    IPaymentGateway,
    PaymentCharge,
)


class StubPaymentGateway(IPaymentGateway):
    """
    Records charges and answers with a configured outcome.

    Set decline_reason to decline charges, or error to make charge() raise
    PaymentGatewayError.
    """

    def __init__(
        self,
        decline_reason: Optional[str] = None,
        error: Optional[str] = None,
    ):
        self.decline_reason = decline_reason
        self.error = error
        self.charges: List[PaymentCharge] = []
        self.closed = False

    async def charge(self, charge: PaymentCharge) -> GatewayChargeResult:
        self.charges.append(charge)
        if self.error:
            raise PaymentGatewayError(self.error)
        reference = f"ch_{uuid4().hex[:12]}"
        if self.decline_reason:
            return GatewayChargeResult(
                reference=reference,
                succeeded=False,
                failure_reason=self.decline_reason,
            )
        return GatewayChargeResult(reference=reference, succeeded=True)

    async def close(self) -> None:
        self.closed = True
