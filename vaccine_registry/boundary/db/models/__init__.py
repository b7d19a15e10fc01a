"""
Database models package.

Exports:
  - VaccineModel: Vaccine ORM model

Dependencies: sqlalchemy, vaccine_registry.boundary.db.base
System role: Database model definitions for domain entities
"""

from vaccine_registry.boundary.db.models.vaccine_model import VaccineModel

__all__ = ["VaccineModel"]
