"""
JWT token handler for authentication.

Provides token creation, validation, and user extraction.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from talardnad.domain.exceptions.auth import ExpiredTokenError, InvalidTokenError


class JWTHandler:
    """
    Issues and validates HS256 access tokens.

    Holds its own secret so several apps (and tests) can run side by side
    with different keys.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_hours: int = 24,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expiration_hours = expiration_hours

    def create_access_token(self, user_id: UUID, username: str) -> str:
        """
        Create JWT access token for authenticated user.

        Args:
            user_id: User UUID
            username: Login name

        Returns:
            Encoded JWT token string

        Example:
            >>> token = handler.create_access_token(
            ...     user_id=UUID("..."),
            ...     username="somchai"
            ... )
        """
        now = datetime.now(timezone.utc)
        expire = now + timedelta(hours=self.expiration_hours)

        payload = {
            "sub": str(user_id),  # Subject (standard JWT claim)
            "username": username,
            "iat": now,
            "exp": expire,
            "type": "access",
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_access_token(self, token: str) -> Dict[str, str]:
        """
        Decode and validate JWT access token.

        Args:
            token: JWT token string

        Returns:
            Dictionary with decoded payload (user_id, username)

        Raises:
            ExpiredTokenError: If token has expired
            InvalidTokenError: If token is invalid or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
            )
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError:
            raise InvalidTokenError()

        user_id = payload.get("sub")
        username = payload.get("username")

        if not user_id or not username or payload.get("type") != "access":
            raise InvalidTokenError()

        return {"user_id": user_id, "username": username}

    def extract_user_id(self, token: str) -> UUID:
        """
        Extract user ID from token.

        Raises:
            InvalidTokenError: If token is invalid or subject is not a UUID
        """
        payload = self.decode_access_token(token)
        try:
            return UUID(payload["user_id"])
        except ValueError:
            raise InvalidTokenError()
