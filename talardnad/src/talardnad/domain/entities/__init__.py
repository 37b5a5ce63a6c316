"""
Domain entities.
"""

from talardnad.domain.entities.market import Market, MarketWithProvider
from talardnad.domain.entities.payment import Payment, PaymentStatus
from talardnad.domain.entities.provider import Provider
from talardnad.domain.entities.user import User

__all__ = [
    "User",
    "Provider",
    "Market",
    "MarketWithProvider",
    "Payment",
    "PaymentStatus",
]
