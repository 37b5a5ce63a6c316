"""API routes."""
from talardnad.presentation.api.routes import (
    auth,
    health,
    markets,
    payments,
    providers,
    users,
)

__all__ = [
    "auth",
    "health",
    "markets",
    "payments",
    "providers",
    "users",
]
