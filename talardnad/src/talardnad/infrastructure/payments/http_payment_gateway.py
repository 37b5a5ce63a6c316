"""
HTTP Payment Gateway implementation.

Charges users through the external payment provider's REST API.
"""

import asyncio
import time
from typing import Optional

import httpx

from talardnad.domain.exceptions import PaymentGatewayError
from talardnad.domain.services.i_payment_gateway import (
    GatewayChargeResult,
    IPaymentGateway,
    PaymentCharge,
)
from talardnad.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


class HttpPaymentGateway(IPaymentGateway):
    """
    Payment gateway client over httpx.

    Wire contract:
    - POST {base_url}/charges with bearer API key
    - Idempotency-Key header set to the payment ID
    - 2xx body: {"id": str, "status": "succeeded" | "failed",
      "failure_reason": str | null}

    Client is lazily initialized on first use and released by close().
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize gateway client.

        Args:
            base_url: Gateway base URL
            api_key: Bearer API key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.base_url,
                        timeout=self.timeout,
                        transport=self._transport,
                        headers={"Authorization": f"Bearer {self.api_key}"},
                        limits=httpx.Limits(
                            max_connections=10,
                            max_keepalive_connections=5,
                        ),
                    )
        return self._client

    async def charge(self, charge: PaymentCharge) -> GatewayChargeResult:
        """
        Charge through the gateway.

        Args:
            charge: Charge details

        Returns:
            GatewayChargeResult with reference and outcome

        Raises:
            PaymentGatewayError: On network error, non-2xx status or
                malformed response
        """
        body = {
            "amount": str(charge.amount),
            "currency": charge.currency,
            "customer": str(charge.user_id),
            "reference": str(charge.payment_id),
            "description": charge.description,
        }

        start = time.time()
        try:
            client = await self._ensure_client()
            response = await client.post(
                "/charges",
                json=body,
                headers={"Idempotency-Key": str(charge.payment_id)},
            )
            response.raise_for_status()
            data = response.json()
            result = GatewayChargeResult(
                reference=str(data["id"]),
                succeeded=data["status"] == "succeeded",
                failure_reason=data.get("failure_reason"),
            )
        except httpx.HTTPStatusError as e:
            metrics.payment_gateway_requests_total.labels(outcome="error").inc()
            raise PaymentGatewayError(
                f"HTTP {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.RequestError as e:
            metrics.payment_gateway_requests_total.labels(outcome="error").inc()
            raise PaymentGatewayError(f"Network error: {e}") from e
        except (ValueError, KeyError, TypeError) as e:
            metrics.payment_gateway_requests_total.labels(outcome="error").inc()
            raise PaymentGatewayError(f"Invalid response format: {e}") from e
        finally:
            metrics.payment_gateway_request_duration_seconds.observe(
                time.time() - start
            )

        outcome = "succeeded" if result.succeeded else "declined"
        metrics.payment_gateway_requests_total.labels(outcome=outcome).inc()
        logger.info(
            f"Gateway charge {result.reference} for payment "
            f"{charge.payment_id}: {outcome}"
        )
        return result

    async def close(self) -> None:
        """Close HTTP client and cleanup resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
