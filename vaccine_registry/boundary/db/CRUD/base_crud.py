"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes. Records are
addressed by a single primary-key column named at construction time.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from collections.abc import Iterable
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from vaccine_registry.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Subclasses should specify the model class and key column and can override
    or extend these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
        key: Name of the primary-key attribute used for lookups
    """

    def __init__(self, model: type[ModelT], key: str = "id") -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
            key: Primary-key attribute name
        """
        self.model = model
        self.key = key

    @property
    def key_column(self):
        return getattr(self.model, self.key)

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated defaults and timestamps

        Raises:
            IntegrityError: If the key already exists
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_key(self, session: AsyncSession, key: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            key: Primary-key value

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.key_column == key)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records with optional pagination.

        Args:
            session: Async database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_existing_keys(
        self,
        session: AsyncSession,
        keys: Iterable[Any],
    ) -> set[Any]:
        """
        Return the subset of keys that are present in the table.

        Args:
            session: Async database session
            keys: Candidate primary-key values

        Returns:
            Set of keys that exist
        """
        candidates = list(keys)
        if not candidates:
            return set()
        stmt = select(self.key_column).where(self.key_column.in_(candidates))
        result = await session.execute(stmt)
        return set(result.scalars().all())

    async def replace_by_key(
        self,
        session: AsyncSession,
        key: Any,
        **kwargs,
    ) -> ModelT | None:
        """
        Overwrite the given fields of a record by primary key.

        Args:
            session: Async database session
            key: Primary-key value
            **kwargs: Fields to set with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        instance = await self.get_by_key(session, key)
        if instance is None:
            return None
        for name, value in kwargs.items():
            setattr(instance, name, value)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete_by_key(self, session: AsyncSession, key: Any) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            key: Primary-key value

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.key_column == key)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, key: Any) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            key: Primary-key value

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.key_column).where(self.key_column == key)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
