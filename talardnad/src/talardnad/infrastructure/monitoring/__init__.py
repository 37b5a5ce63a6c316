"""
Monitoring and observability infrastructure.
"""

from talardnad.infrastructure.monitoring import metrics
from talardnad.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    set_request_id,
    setup_logging,
)

__all__ = [
    "metrics",
    "get_logger",
    "get_request_id",
    "set_request_id",
    "setup_logging",
]
