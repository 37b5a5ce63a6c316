"""Repository implementations."""

from talardnad.infrastructure.persistence.repositories.market_repository import (
    MarketRepository,
)
from talardnad.infrastructure.persistence.repositories.payment_repository import (
    PaymentRepository,
)
from talardnad.infrastructure.persistence.repositories.provider_repository import (
    ProviderRepository,
)
from talardnad.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "UserRepository",
    "ProviderRepository",
    "MarketRepository",
    "PaymentRepository",
]
