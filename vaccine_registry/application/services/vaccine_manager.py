"""
Vaccine registry manager.

Coordinates vaccine lifecycle operations: runs the validation engine
against the store's current codes, then mutates or queries the store.
Domain failures are returned as Result faults; store failures propagate.

Dependencies: vaccine_registry.boundary.db.CRUD, vaccine_registry.core
System role: Vaccine use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from vaccine_registry.boundary.db.CRUD.vaccine_crud import vaccine_crud
from vaccine_registry.boundary.db.models.vaccine_model import VaccineModel
from vaccine_registry.core.exceptions import DuplicateKey, InvalidArgumentError, NotFound
from vaccine_registry.core.result import Result
from vaccine_registry.core.vaccine_records import Vaccine, VaccineType
from vaccine_registry.core.vaccine_validation import Operation, validate_vaccine

logger = logging.getLogger(__name__)


def _require_code(code: str | None, argument: str = "code") -> str:
    if code is None or not code.strip():
        raise InvalidArgumentError(argument)
    return code


def _to_record(model: VaccineModel) -> Vaccine:
    return Vaccine(
        code=model.code,
        description=model.description,
        vaccine_type=VaccineType(
            code=model.vaccine_type_code,
            description=model.vaccine_type_description,
        ),
        image=model.image,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _to_columns(record: Vaccine) -> dict[str, Any]:
    # Only called after validation, so vaccine_type is complete
    return {
        "description": record.description,
        "vaccine_type_code": record.vaccine_type.code,
        "vaccine_type_description": record.vaccine_type.description,
        "image": record.image,
    }


class VaccineManager:
    """Vaccine registry orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize vaccine manager with an explicit store handle.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def list_vaccines(self, type_code: str | None = None) -> list[Vaccine]:
        """
        Get all vaccines in store order.

        Args:
            type_code: Restrict to vaccines of this vaccine type (optional)

        Returns:
            list[Vaccine]: Stored vaccines, empty when the registry is empty

        Raises:
            InvalidArgumentError: If type_code is given but blank
        """
        try:
            if type_code is None:
                rows = await vaccine_crud.get_all(self.db)
            else:
                _require_code(type_code, "type_code")
                rows = await vaccine_crud.get_by_type_code(self.db, type_code)
            return [_to_record(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(
                "Failed to list vaccines",
                extra={"error": str(e), "type_code": type_code},
            )
            raise

    async def find(self, code: str | None) -> Result[Vaccine]:
        """
        Get vaccine by code.

        Args:
            code: Vaccine code

        Returns:
            Result[Vaccine]: The vaccine, or a NotFound fault

        Raises:
            InvalidArgumentError: If code is None or blank
        """
        _require_code(code)
        try:
            row = await vaccine_crud.get_by_key(self.db, code)
        except SQLAlchemyError as e:
            logger.error("Failed to get vaccine", extra={"error": str(e), "code": code})
            raise

        if row is None:
            return Result.failure(NotFound.for_code(code))
        return Result.success(_to_record(row))

    async def exists(self, code: str | None) -> bool:
        """
        Check whether a vaccine code is registered.

        Args:
            code: Vaccine code

        Returns:
            bool: True if present

        Raises:
            InvalidArgumentError: If code is None or blank
        """
        _require_code(code)
        return await vaccine_crud.exists(self.db, code)

    async def create(self, record: Vaccine) -> Result[Vaccine]:
        """
        Validate and persist a new vaccine.

        Args:
            record: Vaccine to create

        Returns:
            Result[Vaccine]: Stored vaccine with timestamps, or a
            ConstraintViolation / DuplicateKey fault

        Raises:
            InvalidArgumentError: If record.code is None or blank
        """
        _require_code(record.code)
        existing = await vaccine_crud.get_existing_keys(self.db, [record.code])
        validation = validate_vaccine(record, existing, Operation.CREATE)
        if not validation.ok:
            logger.warning(
                "Vaccine create rejected",
                extra={"code": record.code, "fault": validation.violation.message},
            )
            return Result.failure(validation.violation)

        try:
            row = await vaccine_crud.create(self.db, code=record.code, **_to_columns(record))
            stored = _to_record(row)
            await self.db.commit()
        except IntegrityError:
            # Another writer inserted the same code after our check
            await self.db.rollback()
            logger.warning("Vaccine create lost race on code", extra={"code": record.code})
            return Result.failure(DuplicateKey.for_code(record.code))
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create vaccine", extra={"error": str(e), "code": record.code})
            raise

        logger.info("Vaccine created", extra={"code": stored.code})
        return Result.success(stored)

    async def update(self, record: Vaccine) -> Result[Vaccine]:
        """
        Validate and fully replace an existing vaccine.

        The code identifies the target and is never changed.

        Args:
            record: Replacement vaccine

        Returns:
            Result[Vaccine]: Stored vaccine, or a ConstraintViolation / NotFound fault

        Raises:
            InvalidArgumentError: If record.code is None or blank
        """
        _require_code(record.code)
        existing = await vaccine_crud.get_existing_keys(self.db, [record.code])
        validation = validate_vaccine(record, existing, Operation.UPDATE)
        if not validation.ok:
            logger.warning(
                "Vaccine update rejected",
                extra={"code": record.code, "fault": validation.violation.message},
            )
            return Result.failure(validation.violation)

        try:
            row = await vaccine_crud.replace_by_key(self.db, record.code, **_to_columns(record))
            if row is None:
                await self.db.rollback()
                return Result.failure(NotFound.for_code(record.code))
            stored = _to_record(row)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to update vaccine", extra={"error": str(e), "code": record.code})
            raise

        logger.info("Vaccine updated", extra={"code": stored.code})
        return Result.success(stored)

    async def delete(self, code: str | None) -> bool:
        """
        Delete vaccine by code.

        Args:
            code: Vaccine code

        Returns:
            bool: True if a vaccine was removed, False if there was nothing to delete

        Raises:
            InvalidArgumentError: If code is None or blank
        """
        _require_code(code)
        try:
            if await vaccine_crud.get_by_key(self.db, code) is None:
                logger.info("Vaccine delete skipped, code absent", extra={"code": code})
                return False

            deleted = await vaccine_crud.delete_by_key(self.db, code)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to delete vaccine", extra={"error": str(e), "code": code})
            raise

        logger.info("Vaccine deleted", extra={"code": code, "deleted": deleted})
        return deleted
