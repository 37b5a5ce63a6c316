"""
Market entity - Domain model for provider-owned markets.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from talardnad.domain.entities.provider import Provider


@dataclass
class Market:
    """
    Market entity.

    Business rules:
    - Name is unique across all markets
    - Provider must exist when the market is created
    - Identifier is generated by the application, never by the store
    - Descriptive fields are stored exactly as submitted
    """

    id: UUID = field(default_factory=uuid4)
    provider_id: Optional[UUID] = field(default=None)
    name: str = field(default="")
    address: Optional[str] = field(default=None)
    description: Optional[str] = field(default=None)
    image: Optional[str] = field(default=None)
    open_time: Optional[str] = field(default=None)
    close_time: Optional[str] = field(default=None)
    latitude: Optional[float] = field(default=None)
    longitude: Optional[float] = field(default=None)
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class MarketWithProvider:
    """Read-only view of a market with its provider resolved."""

    market: Market
    provider: Provider

    @property
    def id(self) -> UUID:
        return self.market.id
