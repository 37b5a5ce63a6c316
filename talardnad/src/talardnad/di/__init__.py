"""Dependency injection package."""

from talardnad.di.container import DIContainer

__all__ = ["DIContainer"]
