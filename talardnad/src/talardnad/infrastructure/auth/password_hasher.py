"""
Bcrypt password hashing.
"""

import logging

import bcrypt

from talardnad.domain.services.i_password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(IPasswordHasher):
    """Bcrypt implementation of password hashing."""

    def __init__(self, rounds: int = 12):
        """
        Initialize hasher.

        Args:
            rounds: Bcrypt cost factor (lower only in tests)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError as e:
            # Malformed stored hash
            logger.error(f"Password verification failed: {e}")
            return False
