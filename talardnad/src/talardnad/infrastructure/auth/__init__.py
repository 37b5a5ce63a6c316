"""Authentication infrastructure."""

from talardnad.infrastructure.auth.jwt_handler import JWTHandler
from talardnad.infrastructure.auth.password_hasher import BcryptPasswordHasher

__all__ = ["JWTHandler", "BcryptPasswordHasher"]
