"""
Domain exceptions package.
"""

# Auth exceptions
from talardnad.domain.exceptions.auth import (
    AuthenticationError,
    ExpiredTokenError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
)

# Base exceptions
from talardnad.domain.exceptions.base import (
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorKind,
    InternalError,
    RepositoryError,
    TalardnadException,
    ValidationError,
    is_not_found,
)

# Market exceptions
from talardnad.domain.exceptions.market import (
    MarketAlreadyExistsError,
    MarketDetailsUnavailableError,
    ProviderNotFoundError,
)

# Payment exceptions
from talardnad.domain.exceptions.payment import PaymentError, PaymentGatewayError

__all__ = [
    # Base
    "ErrorKind",
    "TalardnadException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "InternalError",
    "RepositoryError",
    "is_not_found",
    # Auth
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "ForbiddenError",
    # Market
    "ProviderNotFoundError",
    "MarketAlreadyExistsError",
    "MarketDetailsUnavailableError",
    # Payment
    "PaymentError",
    "PaymentGatewayError",
]
