"""
Payment entity - Domain model for charges made through the payment gateway.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class PaymentStatus(str, Enum):
    """Payment lifecycle states."""

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class Payment:
    """
    Payment entity.

    Business rules:
    - Amount must be positive
    - Currency is a 3-letter ISO code, stored upper-case
    - Status transitions: pending -> succeeded/failed
    """

    id: UUID = field(default_factory=uuid4)
    user_id: UUID = field(default_factory=uuid4)
    market_id: Optional[UUID] = field(default=None)
    amount: Decimal = field(default=Decimal("0"))
    currency: str = field(default="THB")
    status: PaymentStatus = field(default=PaymentStatus.PENDING)
    gateway_reference: Optional[str] = field(default=None)
    description: Optional[str] = field(default=None)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate payment data after initialization."""
        if self.amount <= 0:
            raise ValueError(f"Payment amount must be positive: {self.amount}")

        if len(self.currency) != 3 or not self.currency.isalpha():
            raise ValueError(f"Invalid currency code: {self.currency!r}")
        self.currency = self.currency.upper()

    def mark_succeeded(self, gateway_reference: str) -> None:
        """Record a successful charge."""
        if self.status != PaymentStatus.PENDING:
            raise ValueError(f"Cannot complete payment in status {self.status.value}")
        self.status = PaymentStatus.SUCCEEDED
        self.gateway_reference = gateway_reference
        self.updated_at = datetime.now()

    def mark_failed(self, gateway_reference: Optional[str] = None) -> None:
        """Record a declined charge."""
        if self.status != PaymentStatus.PENDING:
            raise ValueError(f"Cannot fail payment in status {self.status.value}")
        self.status = PaymentStatus.FAILED
        self.gateway_reference = gateway_reference
        self.updated_at = datetime.now()
