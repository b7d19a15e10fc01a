"""API routers."""

from .health import router as health_router
from .vaccines import router as vaccines_router

__all__ = [
    "health_router",
    "vaccines_router",
]
