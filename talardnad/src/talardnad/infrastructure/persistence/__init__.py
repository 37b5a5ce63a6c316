"""Persistence infrastructure."""

from talardnad.infrastructure.persistence.database import Database

__all__ = ["Database"]
