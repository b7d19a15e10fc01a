"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, vaccine_registry.configs
System role: Database schema initialization

Usage:
    python -m vaccine_registry.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from vaccine_registry.boundary.db.base import Base
from vaccine_registry.boundary.db.connection import get_async_engine
from vaccine_registry.configs import get_settings

# Import all models to register them with Base.metadata
from vaccine_registry.boundary.db.models.vaccine_model import VaccineModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run multiple times. Existing tables remain unchanged.

    Args:
        engine: Target async engine

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Target async engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database tables dropped")


async def _main() -> None:
    engine = get_async_engine(get_settings().database)
    try:
        await create_all_tables(engine)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(_main())
