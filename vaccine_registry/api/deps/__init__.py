"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import get_vaccine_manager

__all__ = [
    "get_vaccine_manager",
]
