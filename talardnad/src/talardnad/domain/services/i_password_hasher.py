"""
Password Hasher interface.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Interface for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain-text password."""

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain-text password against a stored hash."""
