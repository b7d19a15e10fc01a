"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from vaccine_registry.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from vaccine_registry.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
