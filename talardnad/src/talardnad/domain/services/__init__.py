"""
Domain services package.
"""

from talardnad.domain.services.i_password_hasher import IPasswordHasher
from talardnad.domain.services.i_payment_gateway import (
    GatewayChargeResult,
    IPaymentGateway,
    PaymentCharge,
)

__all__ = [
    "IPasswordHasher",
    "IPaymentGateway",
    "PaymentCharge",
    "GatewayChargeResult",
]
