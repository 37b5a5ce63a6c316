"""
Market domain exceptions.
"""

from uuid import UUID

from talardnad.domain.exceptions.base import (
    ErrorKind,
    InternalError,
    TalardnadException,
)


class ProviderNotFoundError(TalardnadException):
    """Raised when a market references a provider that does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, provider_id: UUID | str):
        self.provider_id = provider_id
        super().__init__("Provider not found", code="PROVIDER_NOT_FOUND")


class MarketAlreadyExistsError(TalardnadException):
    """Raised when a market with the same name already exists."""

    kind = ErrorKind.CONFLICT

    def __init__(self, name: str):
        self.name = name
        super().__init__("Market already exists", code="MARKET_ALREADY_EXISTS")


class MarketDetailsUnavailableError(InternalError):
    """
    Raised when a market was written but could not be read back.

    The market is committed; callers must not assume it was rolled back.
    """

    committed = True

    def __init__(self, market_id: UUID, reason: str):
        self.market_id = market_id
        super().__init__(
            f"Failed to retrieve market details: {reason}",
            code="MARKET_UNCONFIRMED",
        )
