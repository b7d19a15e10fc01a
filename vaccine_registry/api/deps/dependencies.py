"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: vaccine_registry.application, vaccine_registry.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from vaccine_registry.boundary.db import get_async_db
from vaccine_registry.application.services import VaccineManager


def get_vaccine_manager(db: AsyncSession = Depends(get_async_db)) -> VaccineManager:
    """
    Get vaccine manager instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        VaccineManager: Manager bound to this request's session
    """
    return VaccineManager(db=db)
