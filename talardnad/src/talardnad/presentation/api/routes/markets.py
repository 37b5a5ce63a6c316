"""
Market API routes.

- POST /markets - Create market (guarded create)
- GET /markets/{market_id} - Market with provider
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from talardnad.application.use_cases.create_market import (
    CreateMarket,
    CreateMarketCommand,
)
from talardnad.application.use_cases.get_market import (
    GetMarket,
    GetMarketCommand,
)
from talardnad.di.dependencies import get_create_market, get_get_market
from talardnad.domain.entities.user import User
from talardnad.presentation.api.middleware.auth import get_current_user
from talardnad.presentation.schemas.market_schemas import (
    CreateMarketRequest,
    MarketWithProviderResponse,
)

router = APIRouter(prefix="/markets", tags=["Markets"])


@router.post(
    "",
    response_model=MarketWithProviderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create market",
    description="Create a market under an existing provider",
)
async def create_market(
    request: CreateMarketRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreateMarket = Depends(get_create_market),
) -> MarketWithProviderResponse:
    """
    Create market and return it with provider details.

    Errors:
    - 404 if provider does not exist
    - 400 if a market with that name exists
    - 500 if storage fails (market may already be saved if the
      error code is MARKET_UNCONFIRMED)
    """
    created = await use_case.execute(
        CreateMarketCommand(
            provider_id=request.provider_id,
            name=request.name,
            address=request.address,
            description=request.description,
            image=request.image,
            open_time=request.open_time,
            close_time=request.close_time,
            latitude=request.latitude,
            longitude=request.longitude,
        )
    )
    return MarketWithProviderResponse.from_projection(created)


@router.get(
    "/{market_id}",
    response_model=MarketWithProviderResponse,
    summary="Get market",
)
async def get_market(
    market_id: UUID,
    use_case: GetMarket = Depends(get_get_market),
) -> MarketWithProviderResponse:
    """Get market with provider (404 if not found)."""
    market = await use_case.execute(GetMarketCommand(market_id=market_id))
    return MarketWithProviderResponse.from_projection(market)
