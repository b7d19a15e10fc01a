"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite store sessions, vaccine record factories,
and a TestClient bound to an isolated application instance.
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from vaccine_registry.api.main import create_app
from vaccine_registry.configs.database import DatabaseSettings
from vaccine_registry.configs.settings import Settings
from vaccine_registry.core.vaccine_records import Vaccine, VaccineType

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Each test gets its own engine, so stores never leak between tests.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from vaccine_registry.boundary.db.connection import (
        get_async_engine,
        get_async_session_factory,
    )
    from vaccine_registry.boundary.db.create_tables import create_all_tables, drop_all_tables

    engine = get_async_engine(DatabaseSettings(url=SQLITE_MEMORY_URL))
    await create_all_tables(engine)

    async_session = get_async_session_factory(engine)

    async with async_session() as session:
        yield session
        await session.rollback()

    await drop_all_tables(engine)
    await engine.dispose()


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a fresh in-memory SQLite database."""
    return Settings(
        database=DatabaseSettings(url=SQLITE_MEMORY_URL, create_tables=True),
    )


@pytest.fixture
def client(test_settings: Settings):
    """
    TestClient with lifespan running, so tables exist and one event loop
    serves every request in the test.
    """
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


def _make_vaccine(
    code: str = "Z0",
    description: str = "D",
    type_code: str | None = "TT",
    type_description: str | None = "Default",
    image: bytes | None = None,
) -> Vaccine:
    """Build a vaccine record with a default vaccine type."""
    return Vaccine(
        code=code,
        description=description,
        vaccine_type=VaccineType(code=type_code, description=type_description),
        image=image,
    )


def _vaccine_body(
    code: str = "Z0",
    description: str = "D",
    type_code: str | None = "TT",
    type_description: str | None = "Default",
    **extra,
) -> dict:
    """Build a JSON request body for the vaccine endpoints."""
    body = {
        "code": code,
        "description": description,
        "vaccine_type": {"code": type_code, "description": type_description},
    }
    body.update(extra)
    return body


@pytest.fixture
def make_vaccine():
    """Factory for vaccine records."""
    return _make_vaccine


@pytest.fixture
def vaccine_body():
    """Factory for vaccine request bodies."""
    return _vaccine_body
