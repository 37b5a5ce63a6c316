"""
Repository interfaces (implemented in infrastructure.persistence).
"""

from talardnad.domain.repositories.i_market_repository import IMarketRepository
from talardnad.domain.repositories.i_payment_repository import IPaymentRepository
from talardnad.domain.repositories.i_provider_repository import (
    IProviderRepository,
)
from talardnad.domain.repositories.i_user_repository import IUserRepository

__all__ = [
    "IUserRepository",
    "IProviderRepository",
    "IMarketRepository",
    "IPaymentRepository",
]
