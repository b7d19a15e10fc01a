"""
Vaccines router package.

Exports the router for vaccine registry endpoints and the error handler
registration used by the application factory.
"""

from .vaccines_router import router
from .vaccine_error_handling import register_vaccine_error_handlers

__all__ = ["router", "register_vaccine_error_handlers"]
