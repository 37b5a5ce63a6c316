"""
Authentication API schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from talardnad.presentation.schemas.user_schemas import UserResponse

# bcrypt only uses the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes when UTF-8 encoded"
        )
    return value


class RegisterRequest(BaseModel):
    """Request to register a new account."""

    username: str = Field(..., min_length=3, max_length=64)
    email: str = Field(
        ..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$"
    )
    password: str = Field(..., min_length=8, max_length=PASSWORD_MAX_BYTES)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class LoginRequest(BaseModel):
    """Request to log in with username and password."""

    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class LoginResponse(BaseModel):
    """Access token issued on login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse
