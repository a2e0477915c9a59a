"""
Integration tests for the SQLAlchemy person store against SQLite
"""

from unittest.mock import AsyncMock, patch

import pytest

from phonebook.database.connection import get_async_session
from phonebook.database.seed_data import seed_persons
from phonebook.store import DuplicateNameError, validate_draft
from phonebook.store.base import validate_phone_update
from phonebook.store.database import DatabasePersonStore

pytestmark = [pytest.mark.integration, pytest.mark.requires_db]


def _draft(name: str = "Alice Smith", phone: str | None = "555-12345"):
    return validate_draft(name=name, phone=phone, street="Main Street", city="Springfield")


@pytest.fixture
def store(sqlite_database: str) -> DatabasePersonStore:
    return DatabasePersonStore(get_async_session)


async def _seed() -> int:
    async with get_async_session() as db:
        return await seed_persons(db)


@pytest.mark.asyncio
async def test_empty_database(store: DatabasePersonStore):
    assert await store.count() == 0
    assert await store.list_all() == []
    assert await store.find_by_name("Midu") is None


@pytest.mark.asyncio
async def test_seed_is_idempotent(store: DatabasePersonStore):
    assert await _seed() == 3
    assert await _seed() == 0
    assert await store.count() == 3


@pytest.mark.asyncio
async def test_seeded_reads(store: DatabasePersonStore):
    await _seed()

    assert [p.name for p in await store.list_all()] == ["Midu", "Youseff", "Itzi"]
    assert [p.name for p in await store.list_all(True)] == ["Midu", "Youseff"]
    assert [p.name for p in await store.list_all(False)] == ["Itzi"]

    midu = await store.find_by_name("Midu")
    assert midu is not None
    assert midu.id == "3d594650-3436-11e9-bc57-8b80ba54c431"
    assert midu.phone == "034-1234567"


@pytest.mark.asyncio
async def test_insert_and_find(store: DatabasePersonStore):
    person = await store.insert(_draft())

    assert person.id
    assert await store.count() == 1
    assert await store.find_by_name("Alice Smith") == person
    assert await store.find_by_name("alice smith") is None


@pytest.mark.asyncio
async def test_insert_duplicate_leaves_table_unchanged(store: DatabasePersonStore):
    await store.insert(_draft())

    with pytest.raises(DuplicateNameError) as exc_info:
        await store.insert(_draft(phone=None))

    assert exc_info.value.name == "Alice Smith"
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_update_phone(store: DatabasePersonStore):
    original = await store.insert(_draft(phone=None))

    updated = await store.update_phone_by_name(
        validate_phone_update(name="Alice Smith", phone="600-700800")
    )

    assert updated is not None
    assert updated.phone == "600-700800"
    assert (updated.id, updated.name, updated.street, updated.city) == (
        original.id,
        original.name,
        original.street,
        original.city,
    )
    assert await store.find_by_name("Alice Smith") == updated


@pytest.mark.asyncio
async def test_update_phone_unknown_name(store: DatabasePersonStore):
    await store.insert(_draft())

    result = await store.update_phone_by_name(
        validate_phone_update(name="Nobody Here", phone="600-700800")
    )

    assert result is None
    assert [p.phone for p in await store.list_all()] == ["555-12345"]


@pytest.mark.asyncio
async def test_unique_constraint_maps_to_duplicate_name(store: DatabasePersonStore):
    await store.insert(_draft())

    # Skip the pre-check so the table's unique constraint has to catch it
    with patch.object(DatabasePersonStore, "_get_by_name", AsyncMock(return_value=None)):
        with pytest.raises(DuplicateNameError):
            await store.insert(_draft(phone=None))

    assert await store.count() == 1
