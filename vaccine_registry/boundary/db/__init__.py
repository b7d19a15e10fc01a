"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - VaccineModel: Vaccine ORM model
  - vaccine_crud: CRUD operation singleton

Dependencies: sqlalchemy, vaccine_registry.configs
System role: Database adapter providing the vaccine store
"""

from vaccine_registry.boundary.db.base import Base, TimestampMixin
from vaccine_registry.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from vaccine_registry.boundary.db.models.vaccine_model import VaccineModel
from vaccine_registry.boundary.db.CRUD import BaseCRUD, VaccineCRUD, vaccine_crud

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "VaccineModel",
    # CRUD
    "BaseCRUD",
    "VaccineCRUD",
    "vaccine_crud",
]
