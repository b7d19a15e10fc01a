"""Service orchestrators."""

from .vaccine_manager import VaccineManager

__all__ = ["VaccineManager"]
