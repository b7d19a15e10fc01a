"""
Test suite for VaccineManager.

Tests the vaccine lifecycle through the manager against an in-memory
SQLite store: create, find, exists, update, delete and listing, with
faults returned as Result values and contract violations raised.

System role: Verification of vaccine use case orchestration
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from vaccine_registry.application.services.vaccine_manager import VaccineManager
from vaccine_registry.boundary.db.CRUD.vaccine_crud import vaccine_crud
from vaccine_registry.core.exceptions import (
    ConstraintViolation,
    DuplicateKey,
    InvalidArgumentError,
    NotFound,
)
from vaccine_registry.core.vaccine_records import Vaccine, VaccineType
from vaccine_registry.core.vaccine_validation import CODE_TOO_LONG, TYPE_INCOMPLETE


@pytest.fixture
def manager(test_async_db: AsyncSession) -> VaccineManager:
    """Provide a VaccineManager bound to the test store."""
    return VaccineManager(test_async_db)


class TestCreate:
    """Test suite for VaccineManager.create()."""

    async def test_create_should_store_and_return_vaccine(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        result = await manager.create(make_vaccine(code="Z0", image=b"\x01\x02"))

        assert result.ok
        assert result.value.code == "Z0"
        assert result.value.image == b"\x01\x02"
        assert result.value.created_at is not None
        assert await manager.exists("Z0")

    async def test_create_should_reject_existing_code(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="Z0", description="first"))

        result = await manager.create(make_vaccine(code="Z0", description="second"))

        assert result.fault == DuplicateKey.for_code("Z0")
        stored = (await manager.find("Z0")).unwrap()
        assert stored.description == "first"

    async def test_create_should_map_store_unique_violation_to_duplicate(
        self, manager: VaccineManager, test_async_db: AsyncSession, make_vaccine, monkeypatch
    ) -> None:
        """A writer that passes validation but loses the insert race gets DuplicateKey."""
        await manager.create(make_vaccine(code="Z0", description="first"))
        test_async_db.expunge_all()

        async def no_existing_keys(session, keys):
            return set()

        monkeypatch.setattr(vaccine_crud, "get_existing_keys", no_existing_keys)

        result = await manager.create(make_vaccine(code="Z0", description="second"))

        assert result.fault == DuplicateKey.for_code("Z0")
        stored = (await manager.find("Z0")).unwrap()
        assert stored.description == "first"
        assert len(await manager.list_vaccines()) == 1

    async def test_create_should_accept_ten_character_code(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        result = await manager.create(make_vaccine(code="ABCDEFGHIJ"))

        assert result.ok

    async def test_create_should_reject_eleven_character_code(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        result = await manager.create(make_vaccine(code="ABCDEFGHIJK"))

        assert result.fault == ConstraintViolation(CODE_TOO_LONG, code="ABCDEFGHIJK")
        assert await manager.list_vaccines() == []

    async def test_create_should_reject_incomplete_type(
        self, manager: VaccineManager
    ) -> None:
        record = Vaccine(code="Z0", description="D", vaccine_type=VaccineType(code=None))

        result = await manager.create(record)

        assert result.fault.message == TYPE_INCOMPLETE
        assert not await manager.exists("Z0")

    @pytest.mark.parametrize("code", [None, "", "   "])
    async def test_create_should_raise_for_blank_code(
        self, manager: VaccineManager, make_vaccine, code
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await manager.create(make_vaccine(code=code))


class TestFindAndExists:
    """Test suite for VaccineManager.find() and exists()."""

    async def test_find_should_return_stored_vaccine(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="BCG", description="Tuberculosis"))

        found = (await manager.find("BCG")).unwrap()

        assert found.description == "Tuberculosis"
        assert found.vaccine_type == VaccineType(code="TT", description="Default")

    async def test_find_should_return_not_found_for_absent_code(
        self, manager: VaccineManager
    ) -> None:
        result = await manager.find("NOPE")

        assert result.fault == NotFound.for_code("NOPE")

    async def test_exists_should_track_lifecycle(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        assert await manager.exists("Z0") is False
        await manager.create(make_vaccine(code="Z0"))
        assert await manager.exists("Z0") is True
        await manager.delete("Z0")
        assert await manager.exists("Z0") is False

    @pytest.mark.parametrize("code", [None, ""])
    async def test_lookups_should_raise_for_blank_code(
        self, manager: VaccineManager, code
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            await manager.find(code)
        with pytest.raises(InvalidArgumentError):
            await manager.exists(code)
        with pytest.raises(InvalidArgumentError):
            await manager.delete(code)


class TestUpdate:
    """Test suite for VaccineManager.update()."""

    async def test_update_should_fully_replace_fields(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="Z0", description="old", image=b"old"))

        replacement = make_vaccine(
            code="Z0",
            description="new",
            type_code="NEW",
            type_description=None,
            image=None,
        )
        result = await manager.update(replacement)

        assert result.ok
        stored = (await manager.find("Z0")).unwrap()
        assert stored.description == "new"
        assert stored.vaccine_type == VaccineType(code="NEW", description=None)
        assert stored.image is None

    async def test_update_should_return_not_found_and_leave_store_unchanged(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="A"))

        result = await manager.update(make_vaccine(code="B"))

        assert result.fault == NotFound.for_code("B")
        assert [v.code for v in await manager.list_vaccines()] == ["A"]

    async def test_update_should_reject_long_code_before_existence(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        result = await manager.update(make_vaccine(code="Very-Very-Very-Long"))

        assert result.fault.message == CODE_TOO_LONG

    async def test_update_should_reject_incomplete_type(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="Z0", description="kept"))

        result = await manager.update(Vaccine(code="Z0", description="lost", vaccine_type=None))

        assert result.fault.message == TYPE_INCOMPLETE
        assert (await manager.find("Z0")).unwrap().description == "kept"


class TestDelete:
    """Test suite for VaccineManager.delete()."""

    async def test_delete_should_be_idempotent(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="Z0"))

        assert await manager.delete("Z0") is True
        assert await manager.delete("Z0") is False

    async def test_delete_should_leave_other_vaccines(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="A"))
        await manager.create(make_vaccine(code="B"))

        await manager.delete("A")

        assert [v.code for v in await manager.list_vaccines()] == ["B"]


class TestListVaccines:
    """Test suite for VaccineManager.list_vaccines()."""

    async def test_list_should_be_empty_for_empty_registry(self, manager: VaccineManager) -> None:
        assert await manager.list_vaccines() == []

    async def test_list_should_return_every_stored_vaccine(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        for code in ("A", "B", "C"):
            await manager.create(make_vaccine(code=code))

        codes = sorted(v.code for v in await manager.list_vaccines())

        assert codes == ["A", "B", "C"]

    async def test_list_should_filter_by_type_code(
        self, manager: VaccineManager, make_vaccine
    ) -> None:
        await manager.create(make_vaccine(code="MMR", type_code="VIRAL"))
        await manager.create(make_vaccine(code="BCG", type_code="BACT"))

        viral = await manager.list_vaccines(type_code="VIRAL")

        assert [v.code for v in viral] == ["MMR"]

    async def test_list_should_raise_for_blank_type_code(self, manager: VaccineManager) -> None:
        with pytest.raises(InvalidArgumentError):
            await manager.list_vaccines(type_code=" ")
