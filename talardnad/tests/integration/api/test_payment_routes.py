"""
Integration tests for payment API routes.

The payment gateway is replaced by StubPaymentGateway through the
container.

Usage:
    pytest talardnad/tests/integration/api/test_payment_routes.py
"""

from uuid import uuid4

from helpers.app_factory import ApplicationUnderTest
from helpers.stubs import StubPaymentGateway
from shared.tests import ComponentTest


class TestPaymentRoutes(ComponentTest):
    """Integration tests for /payments."""

    component_name = "talardnad"
    test_category = "integration"

    async def async_setup_test(self):
        self.gateway = StubPaymentGateway()
        self.app = ApplicationUnderTest(payment_gateway=self.gateway)
        self.client = await self.app.start()
        self.user_id, self.headers = await self.app.register_and_login("somchai")

    async def async_teardown_test(self):
        await self.app.stop()

    async def test_create_payment(self):
        """Test successful charge is persisted and readable."""
        self.reporter.info("Testing POST /payments", context="Test")

        response = await self.client.post(
            "/api/v1/payments",
            json={"amount": "120.00", "description": "Stall rent"},
            headers=self.headers,
        )

        assert response.status_code == 201, response.text
        data = response.json()
        assert data["status"] == "succeeded"
        assert data["user_id"] == self.user_id
        assert data["currency"] == "THB"
        assert data["gateway_reference"].startswith("ch_")
        assert len(self.gateway.charges) == 1

        fetched = await self.client.get(
            f"/api/v1/payments/{data['id']}", headers=self.headers
        )
        assert fetched.status_code == 200
        assert fetched.json()["gateway_reference"] == data["gateway_reference"]

    async def test_declined_payment_recorded(self):
        """Test declined charge is stored as failed."""
        self.gateway.decline_reason = "card_declined"

        response = await self.client.post(
            "/api/v1/payments",
            json={"amount": "50"},
            headers=self.headers,
        )

        assert response.status_code == 201
        assert response.json()["status"] == "failed"

    async def test_gateway_error_is_502(self):
        """Test gateway failure surfaces as 502."""
        self.gateway.error = "HTTP 503: maintenance"

        response = await self.client.post(
            "/api/v1/payments",
            json={"amount": "50"},
            headers=self.headers,
        )

        assert response.status_code == 502
        assert response.json()["kind"] == "UPSTREAM"

    async def test_unknown_market(self):
        """Test payment for unknown market is 404."""
        response = await self.client.post(
            "/api/v1/payments",
            json={"amount": "50", "market_id": str(uuid4())},
            headers=self.headers,
        )

        assert response.status_code == 404
        assert self.gateway.charges == []

    async def test_non_positive_amount(self):
        """Test zero amount is 422."""
        response = await self.client.post(
            "/api/v1/payments",
            json={"amount": "0"},
            headers=self.headers,
        )

        assert response.status_code == 422

    async def test_other_users_payment_forbidden(self):
        """Test payments are private to their owner."""
        created = await self.client.post(
            "/api/v1/payments",
            json={"amount": "10"},
            headers=self.headers,
        )
        _, other_headers = await self.app.register_and_login("malee")

        response = await self.client.get(
            f"/api/v1/payments/{created.json()['id']}", headers=other_headers
        )

        assert response.status_code == 403


if __name__ == "__main__":
    TestPaymentRoutes.run_as_main()
