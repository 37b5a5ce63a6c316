"""
Authentication domain exceptions.
"""

from talardnad.domain.exceptions.base import ErrorKind, TalardnadException


class AuthenticationError(TalardnadException):
    """Raised when authentication fails."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTHENTICATION_ERROR")


class InvalidCredentialsError(AuthenticationError):
    """Raised when username/password pair does not match."""

    def __init__(self):
        super().__init__("Invalid username or password")


class ExpiredTokenError(AuthenticationError):
    """Raised when JWT token has expired."""

    def __init__(self):
        super().__init__("Authentication token has expired")


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is malformed or invalid."""

    def __init__(self):
        super().__init__("Invalid authentication token")


class ForbiddenError(TalardnadException):
    """Raised when an authenticated user acts on another user's resource."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, message: str = "Operation not permitted"):
        super().__init__(message, code="FORBIDDEN")
