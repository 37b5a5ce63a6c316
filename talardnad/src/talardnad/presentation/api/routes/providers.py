"""
Provider API routes.

- POST /providers - Register provider owned by current user
- GET /providers/{provider_id} - Provider details
- GET /providers/{provider_id}/markets - Markets owned by provider
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from talardnad.application.use_cases.create_provider import (
    CreateProvider,
    CreateProviderCommand,
    GetProvider,
)
from talardnad.application.use_cases.get_market import ListProviderMarkets
from talardnad.di.dependencies import (
    get_create_provider,
    get_get_provider,
    get_list_provider_markets,
)
from talardnad.domain.entities.user import User
from talardnad.presentation.api.middleware.auth import get_current_user
from talardnad.presentation.schemas.market_schemas import (
    CreateProviderRequest,
    MarketListResponse,
    MarketResponse,
    ProviderResponse,
)

router = APIRouter(prefix="/providers", tags=["Providers"])


@router.post(
    "",
    response_model=ProviderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register provider",
)
async def create_provider(
    request: CreateProviderRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreateProvider = Depends(get_create_provider),
) -> ProviderResponse:
    """
    Register a provider owned by the authenticated user.

    Errors:
    - 400 if provider name is taken
    """
    provider = await use_case.execute(
        CreateProviderCommand(
            owner_id=current_user.id,
            name=request.name,
            email=request.email,
            phone=request.phone,
        )
    )
    return ProviderResponse.from_entity(provider)


@router.get(
    "/{provider_id}",
    response_model=ProviderResponse,
    summary="Get provider",
)
async def get_provider(
    provider_id: UUID,
    use_case: GetProvider = Depends(get_get_provider),
) -> ProviderResponse:
    """Get provider by ID (404 if not found)."""
    provider = await use_case.execute(provider_id)
    return ProviderResponse.from_entity(provider)


@router.get(
    "/{provider_id}/markets",
    response_model=MarketListResponse,
    summary="List provider markets",
)
async def list_provider_markets(
    provider_id: UUID,
    use_case: ListProviderMarkets = Depends(get_list_provider_markets),
) -> MarketListResponse:
    """List markets owned by provider, ordered by name."""
    markets = await use_case.execute(provider_id)
    return MarketListResponse(
        markets=[MarketResponse.from_entity(m) for m in markets],
        total=len(markets),
    )
