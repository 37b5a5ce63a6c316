"""
Payment repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from talardnad.domain.entities.payment import Payment


class IPaymentRepository(ABC):
    """Interface for payment persistence operations."""

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """Create new payment record."""

    @abstractmethod
    async def get_by_id(self, payment_id: UUID) -> Optional[Payment]:
        """Get payment by ID, None if not found."""
