"""
Tests for person GraphQL mutations
"""

from unittest.mock import AsyncMock

import pytest

from phonebook.store import InMemoryPersonStore, ReadOnlyStoreError
from phonebook.store.base import PersonStore

ADD_PERSON = """
    mutation AddPerson($name: String!, $phone: String, $street: String!, $city: String!) {
        addPerson(name: $name, phone: $phone, street: $street, city: $city) {
            name
            phone
            id
            address { street city }
        }
    }
"""

EDIT_NUMBER = """
    mutation EditNumber($name: String!, $phone: String!) {
        editNumber(name: $name, phone: $phone) {
            name
            phone
            id
            address { street city }
        }
    }
"""

NEW_PERSON = {
    "name": "Alice Smith",
    "phone": "555-12345",
    "street": "Main Street",
    "city": "Springfield",
}


class TestAddPerson:
    @pytest.mark.asyncio
    async def test_adds_person(self, execute, memory_store: InMemoryPersonStore):
        result = await execute(ADD_PERSON, NEW_PERSON)

        assert result.errors is None
        person = result.data["addPerson"]
        assert person["name"] == "Alice Smith"
        assert person["phone"] == "555-12345"
        assert person["address"] == {"street": "Main Street", "city": "Springfield"}
        assert person["id"]

        assert await memory_store.count() == 4
        stored = await memory_store.find_by_name("Alice Smith")
        assert stored is not None
        assert stored.id == person["id"]

    @pytest.mark.asyncio
    async def test_phone_is_optional(self, execute):
        variables = {k: v for k, v in NEW_PERSON.items() if k != "phone"}

        result = await execute(ADD_PERSON, variables)

        assert result.errors is None
        assert result.data["addPerson"]["phone"] is None

        without_phone = await execute("{ allPersons(phone: NO) { name } }")
        assert [p["name"] for p in without_phone.data["allPersons"]] == ["Itzi", "Alice Smith"]

    @pytest.mark.asyncio
    async def test_count_grows_by_one(self, execute):
        before = (await execute("{ personCount }")).data["personCount"]

        await execute(ADD_PERSON, NEW_PERSON)

        after = (await execute("{ personCount }")).data["personCount"]
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_duplicate_name(self, execute, memory_store: InMemoryPersonStore):
        before = await memory_store.list_all()

        result = await execute(ADD_PERSON, {**NEW_PERSON, "name": "Youseff"})

        assert result.data == {"addPerson": None}
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.message == "Name must be unique"
        assert error.extensions == {"code": "BAD_USER_INPUT", "invalidArgs": "Youseff"}
        assert await memory_store.list_all() == before

    @pytest.mark.asyncio
    async def test_duplicate_short_name_reports_duplicate(
        self, execute, memory_store: InMemoryPersonStore
    ):
        result = await execute(
            ADD_PERSON, {"name": "Midu", "street": "Main Street", "city": "Springfield"}
        )

        assert result.data == {"addPerson": None}
        error = result.errors[0]
        assert error.message == "Name must be unique"
        assert error.extensions == {"code": "BAD_USER_INPUT", "invalidArgs": "Midu"}
        assert await memory_store.count() == 3

    @pytest.mark.asyncio
    async def test_invalid_fields(self, execute, memory_store: InMemoryPersonStore):
        variables = {**NEW_PERSON, "name": "Bob", "city": "Rome"}

        result = await execute(ADD_PERSON, variables)

        assert result.data == {"addPerson": None}
        error = result.errors[0]
        assert error.extensions["code"] == "BAD_USER_INPUT"
        assert error.extensions["invalidArgs"] == variables
        assert "name" in error.message
        assert "city" in error.message
        assert await memory_store.count() == 3

    @pytest.mark.asyncio
    async def test_read_only_store_is_a_server_error(self, execute):
        store = AsyncMock(spec=PersonStore)
        store.find_by_name.return_value = None
        store.insert.side_effect = ReadOnlyStoreError("The remote person source is read-only")

        result = await execute(ADD_PERSON, NEW_PERSON, store=store)

        assert result.data == {"addPerson": None}
        assert result.errors[0].message == "The remote person source is read-only"
        assert not result.errors[0].extensions


class TestEditNumber:
    @pytest.mark.asyncio
    async def test_updates_phone_only(self, execute, memory_store: InMemoryPersonStore):
        original = await memory_store.find_by_name("Itzi")
        assert original is not None

        result = await execute(EDIT_NUMBER, {"name": "Itzi", "phone": "600-700800"})

        assert result.errors is None
        assert result.data["editNumber"] == {
            "name": "Itzi",
            "phone": "600-700800",
            "id": original.id,
            "address": {"street": "Pasaje Testing", "city": "Ibiza"},
        }
        assert await memory_store.count() == 3

    @pytest.mark.asyncio
    async def test_unknown_name_returns_null(self, execute, memory_store: InMemoryPersonStore):
        before = await memory_store.list_all()

        result = await execute(EDIT_NUMBER, {"name": "Nobody Here", "phone": "600-700800"})

        assert result.errors is None
        assert result.data == {"editNumber": None}
        assert await memory_store.list_all() == before

    @pytest.mark.asyncio
    async def test_unknown_name_with_invalid_phone_returns_null(self, execute):
        result = await execute(EDIT_NUMBER, {"name": "Nobody Here", "phone": "12"})

        assert result.errors is None
        assert result.data == {"editNumber": None}

    @pytest.mark.asyncio
    async def test_invalid_phone(self, execute, memory_store: InMemoryPersonStore):
        result = await execute(EDIT_NUMBER, {"name": "Midu", "phone": "12"})

        assert result.data == {"editNumber": None}
        error = result.errors[0]
        assert error.extensions == {
            "code": "BAD_USER_INPUT",
            "invalidArgs": {"name": "Midu", "phone": "12"},
        }

        midu = await memory_store.find_by_name("Midu")
        assert midu is not None
        assert midu.phone == "034-1234567"
