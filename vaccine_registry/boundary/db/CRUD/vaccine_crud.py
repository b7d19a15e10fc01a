"""
Vaccine CRUD operations.

Provides Create, Read, Update, Delete operations for VaccineModel
keyed by vaccine code, plus vaccine-type queries.

Dependencies: sqlalchemy, vaccine_registry.boundary.db.models
System role: Vaccine persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vaccine_registry.boundary.db.models.vaccine_model import VaccineModel
from vaccine_registry.boundary.db.CRUD.base_crud import BaseCRUD


class VaccineCRUD(BaseCRUD[VaccineModel]):
    """
    CRUD operations for VaccineModel.

    Extends BaseCRUD with lookups by vaccine type.
    """

    def __init__(self) -> None:
        """Initialize VaccineCRUD with VaccineModel keyed by code."""
        super().__init__(VaccineModel, key="code")

    async def get_by_type_code(
        self,
        session: AsyncSession,
        type_code: str,
    ) -> Sequence[VaccineModel]:
        """
        Retrieve all vaccines belonging to a vaccine type.

        Args:
            session: Async database session
            type_code: Vaccine type code

        Returns:
            Sequence of VaccineModels for the type
        """
        stmt = select(VaccineModel).where(VaccineModel.vaccine_type_code == type_code)
        result = await session.execute(stmt)
        return result.scalars().all()


vaccine_crud = VaccineCRUD()
