"""
Application factory for API tests.

Builds an app with its own container, settings and SQLite file. The ASGI
transport does not run the lifespan, so start() initializes the container
itself.
"""

import shutil
from typing import Dict, Optional, Tuple

import httpx
from fastapi import FastAPI

from talardnad.config.settings import Settings
from talardnad.di.container import DIContainer
from talardnad.domain.services.i_payment_gateway import IPaymentGateway
from talardnad.infrastructure.persistence.models import Base
from talardnad.main import create_app

from helpers.database import temporary_database_url
from helpers.stubs import StubPaymentGateway

TEST_JWT_SECRET = "test-secret-key"


def make_test_settings(database_url: str, **overrides) -> Settings:
    """Settings for tests; fast bcrypt, quiet logs."""
    values = {
        "ENV": "test",
        "DATABASE_URL": database_url,
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "BCRYPT_ROUNDS": 4,
        "LOG_LEVEL": "WARNING",
        "PAYMENT_GATEWAY_URL": "http://gateway.test",
        "METRICS_ENABLED": True,
    }
    values.update(overrides)
    return Settings(**values)


class ApplicationUnderTest:
    """App, container and HTTP client bound together for one test."""

    def __init__(self, payment_gateway: Optional[IPaymentGateway] = None):
        database_url, self._directory = temporary_database_url()
        self.settings = make_test_settings(database_url)
        self.gateway = payment_gateway or StubPaymentGateway()
        self.container = DIContainer(self.settings, payment_gateway=self.gateway)
        self.app: FastAPI = create_app(self.settings, self.container)
        self.client: Optional[httpx.AsyncClient] = None

    async def start(self) -> httpx.AsyncClient:
        await self.container.initialize()
        await self.container.database.reset_schema_for_testing(Base.metadata)
        self.client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=self.app),
            base_url="http://test",
        )
        return self.client

    async def stop(self) -> None:
        if self.client is not None:
            await self.client.aclose()
        await self.container.shutdown()
        shutil.rmtree(self._directory, ignore_errors=True)

    async def register_and_login(
        self,
        username: str,
        password: str = "correct-horse-battery",
    ) -> Tuple[str, Dict[str, str]]:
        """
        Register a user through the API and log in.

        Returns:
            (user id, Authorization headers)
        """
        response = await self.client.post(
            "/api/v1/auth/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]

        response = await self.client.post(
            "/api/v1/auth/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        token = response.json()["access_token"]
        return user_id, {"Authorization": f"Bearer {token}"}

    async def create_provider(self, headers: Dict[str, str], name: str) -> str:
        """Create a provider through the API and return its id."""
        response = await self.client.post(
            "/api/v1/providers",
            json={"name": name, "email": "contact@example.com"},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()["id"]
