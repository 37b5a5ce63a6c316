"""
Unit tests for provider use cases and market reads.

Usage:
    pytest talardnad/tests/unit/application/test_provider_and_market_queries.py
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from shared.tests import ComponentTest
from talardnad.application.use_cases.create_provider import (
    CreateProvider,
    CreateProviderCommand,
    GetProvider,
)
from talardnad.application.use_cases.get_market import (
    GetMarket,
    GetMarketCommand,
    ListProviderMarkets,
)
from talardnad.domain.entities.market import Market, MarketWithProvider
from talardnad.domain.entities.provider import Provider
from talardnad.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ErrorKind,
    ProviderNotFoundError,
)


class TestProviderAndMarketQueries(ComponentTest):
    """Unit tests for provider creation and market lookups."""

    component_name = "talardnad"
    test_category = "unit"

    def setup_test(self):
        self.provider = Provider(name="Chatuchak Co")
        self.provider_repo = AsyncMock()
        self.market_repo = AsyncMock()

    async def test_create_provider_success(self):
        """Test provider is owned by the requesting user."""
        self.reporter.info("Testing provider creation", context="Test")

        owner_id = uuid4()
        self.provider_repo.get_by_name.return_value = None
        self.provider_repo.create.side_effect = lambda provider: provider

        provider = await CreateProvider(self.provider_repo).execute(
            CreateProviderCommand(owner_id=owner_id, name="Chatuchak Co")
        )

        assert provider.owner_id == owner_id
        assert provider.name == "Chatuchak Co"

    async def test_create_provider_duplicate_name(self):
        """Test taken provider name is CONFLICT."""
        self.provider_repo.get_by_name.return_value = self.provider

        with pytest.raises(DuplicateEntityError) as exc_info:
            await CreateProvider(self.provider_repo).execute(
                CreateProviderCommand(owner_id=uuid4(), name="Chatuchak Co")
            )

        assert exc_info.value.kind == ErrorKind.CONFLICT
        self.provider_repo.create.assert_not_awaited()

    async def test_get_provider_not_found(self):
        """Test unknown provider is NOT_FOUND."""
        self.provider_repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await GetProvider(self.provider_repo).execute(uuid4())

    async def test_get_market_returns_projection(self):
        """Test market read includes provider."""
        market = Market(provider_id=self.provider.id, name="Weekend Market")
        view = MarketWithProvider(market=market, provider=self.provider)
        self.market_repo.get_with_provider_by_id.return_value = view

        result = await GetMarket(self.market_repo).execute(
            GetMarketCommand(market_id=market.id)
        )

        assert result.provider.name == "Chatuchak Co"
        assert result.provider.id == self.provider.id

    async def test_get_market_not_found(self):
        """Test unknown market is NOT_FOUND."""
        self.market_repo.get_with_provider_by_id.return_value = None

        with pytest.raises(EntityNotFoundError) as exc_info:
            await GetMarket(self.market_repo).execute(
                GetMarketCommand(market_id=uuid4())
            )

        assert exc_info.value.kind == ErrorKind.NOT_FOUND

    async def test_list_markets_unknown_provider(self):
        """Test listing for an unknown provider is NOT_FOUND."""
        self.provider_repo.get_by_id.return_value = None

        with pytest.raises(ProviderNotFoundError):
            await ListProviderMarkets(self.market_repo, self.provider_repo).execute(
                uuid4()
            )

        self.market_repo.list_by_provider.assert_not_awaited()

    async def test_list_markets(self):
        """Test listing returns repository order."""
        self.provider_repo.get_by_id.return_value = self.provider
        markets = [
            Market(provider_id=self.provider.id, name="A Market"),
            Market(provider_id=self.provider.id, name="B Market"),
        ]
        self.market_repo.list_by_provider.return_value = markets

        result = await ListProviderMarkets(
            self.market_repo, self.provider_repo
        ).execute(self.provider.id)

        assert [m.name for m in result] == ["A Market", "B Market"]


if __name__ == "__main__":
    TestProviderAndMarketQueries.run_as_main()
