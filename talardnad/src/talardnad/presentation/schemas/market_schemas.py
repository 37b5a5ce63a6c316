"""
Provider and market API schemas.
"""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from talardnad.domain.entities.market import Market, MarketWithProvider
from talardnad.domain.entities.provider import Provider

# ================================================================
# Provider Schemas
# ================================================================


class CreateProviderRequest(BaseModel):
    """Request to register a provider."""

    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)


class ProviderResponse(BaseModel):
    """Provider details."""

    id: str
    name: str
    owner_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, provider: Provider) -> "ProviderResponse":
        return cls(
            id=str(provider.id),
            name=provider.name,
            owner_id=str(provider.owner_id) if provider.owner_id else None,
            email=provider.email,
            phone=provider.phone,
            created_at=provider.created_at,
        )


# ================================================================
# Market Schemas
# ================================================================


class CreateMarketRequest(BaseModel):
    """Request to create a market under an existing provider."""

    provider_id: UUID
    name: str = Field(..., min_length=1, max_length=255)
    address: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = Field(None, max_length=512)
    open_time: Optional[str] = Field(None, max_length=16, examples=["06:00"])
    close_time: Optional[str] = Field(None, max_length=16, examples=["18:00"])
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class MarketResponse(BaseModel):
    """Market details."""

    id: str
    provider_id: str
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    open_time: Optional[str] = None
    close_time: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, market: Market) -> "MarketResponse":
        return cls(
            id=str(market.id),
            provider_id=str(market.provider_id),
            name=market.name,
            address=market.address,
            description=market.description,
            image=market.image,
            open_time=market.open_time,
            close_time=market.close_time,
            latitude=market.latitude,
            longitude=market.longitude,
            created_at=market.created_at,
        )


class MarketWithProviderResponse(MarketResponse):
    """Market details with provider inlined."""

    provider: ProviderResponse

    @classmethod
    def from_projection(
        cls, view: MarketWithProvider
    ) -> "MarketWithProviderResponse":
        base = MarketResponse.from_entity(view.market)
        return cls(
            **base.model_dump(),
            provider=ProviderResponse.from_entity(view.provider),
        )


class MarketListResponse(BaseModel):
    """Markets owned by a provider."""

    markets: List[MarketResponse]
    total: int
