"""
API middleware for Talardnad.
"""

from talardnad.presentation.api.middleware.error_handler import (
    talardnad_exception_handler,
)

__all__ = ["talardnad_exception_handler"]
