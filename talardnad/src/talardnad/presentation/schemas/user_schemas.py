"""
User API schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from talardnad.domain.entities.user import User


class UserResponse(BaseModel):
    """User profile (never includes the password hash)."""

    id: str
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpdateUserRequest(BaseModel):
    """Request to update user profile; omitted fields are left unchanged."""

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(
        None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$"
    )
