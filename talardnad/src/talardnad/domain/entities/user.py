"""
User entity - Domain model for registered platform users.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class User:
    """
    User entity - account identified by username and email.

    Business rules:
    - Username and email are required and unique (enforced by use case)
    - Password is only ever held as a hash
    """

    id: UUID = field(default_factory=uuid4)
    username: str = field(default="")
    email: str = field(default="")
    password_hash: str = field(default="", repr=False)
    first_name: Optional[str] = field(default=None)
    last_name: Optional[str] = field(default=None)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate user data after initialization."""
        if not self.username:
            raise ValueError("Username is required")

        if not self.email or "@" not in self.email:
            raise ValueError(f"Invalid email address: {self.email!r}")

    def update_profile(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> None:
        """Apply profile changes; None leaves a field untouched."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if email is not None:
            if "@" not in email:
                raise ValueError(f"Invalid email address: {email!r}")
            self.email = email
        self.updated_at = datetime.now()
