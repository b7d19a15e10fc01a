"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from vaccine_registry.boundary.db.CRUD import vaccine_crud

    vaccine = await vaccine_crud.get_by_key(db, "BCG")
"""

from vaccine_registry.boundary.db.CRUD.base_crud import BaseCRUD
from vaccine_registry.boundary.db.CRUD.vaccine_crud import VaccineCRUD, vaccine_crud

__all__ = [
    "BaseCRUD",
    "VaccineCRUD",
    "vaccine_crud",
]
