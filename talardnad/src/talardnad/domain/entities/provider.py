"""
Provider entity - the business that owns markets.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Provider:
    """Provider entity. Markets reference it; they never modify it."""

    id: UUID = field(default_factory=uuid4)
    name: str = field(default="")
    owner_id: Optional[UUID] = field(default=None)
    email: Optional[str] = field(default=None)
    phone: Optional[str] = field(default=None)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate provider data after initialization."""
        if not self.name:
            raise ValueError("Provider name is required")
