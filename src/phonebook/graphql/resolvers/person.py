from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry
from graphql import GraphQLError

from ...logging import get_logger
from ...store.base import (
    DuplicateNameError,
    PersonStore,
    ValidationError,
    address_of,
    validate_draft,
    validate_phone_update,
)

if TYPE_CHECKING:
    from ...store.base import PersonRecord
    from ..types.person import Address, Person, YesNo

logger = get_logger(__name__)

BAD_USER_INPUT = "BAD_USER_INPUT"


def get_store_from_info(info: strawberry.Info) -> PersonStore:
    """Return the person store injected into the GraphQL context."""
    store = info.context.get("store")
    if store is None:
        raise RuntimeError("Person store missing from GraphQL context")
    return store


def user_input_error(message: str, invalid_args: Any) -> GraphQLError:
    return GraphQLError(
        message,
        extensions={"code": BAD_USER_INPUT, "invalidArgs": invalid_args},
    )


def _to_person(record: PersonRecord) -> Person:
    from ..types.person import Person as PersonType

    return PersonType.from_record(record)


# Query resolvers
async def resolve_person_count(info: strawberry.Info) -> int:
    return await get_store_from_info(info).count()


async def resolve_all_persons(info: strawberry.Info, phone: YesNo | None) -> list[Person | None]:
    """
    Resolve all persons.

    A YES filter keeps persons with a phone, NO keeps persons without one.
    """
    has_phone = None if phone is None else phone.value == "YES"
    records = await get_store_from_info(info).list_all(has_phone)
    return [_to_person(record) for record in records]


async def resolve_find_person(info: strawberry.Info, name: str) -> Person | None:
    record = await get_store_from_info(info).find_by_name(name)
    if record is None:
        logger.debug("Person not found", name=name)
        return None
    return _to_person(record)


# Mutation resolvers
async def add_person(
    info: strawberry.Info,
    *,
    name: str,
    phone: str | None,
    street: str,
    city: str,
) -> Person:
    store = get_store_from_info(info)

    try:
        # Duplicate names win over field errors; insert still guards against races
        if await store.find_by_name(name) is not None:
            raise DuplicateNameError(name)
        draft = validate_draft(name=name, phone=phone, street=street, city=city)
        record = await store.insert(draft)
    except DuplicateNameError as e:
        logger.info("Rejected duplicate person", name=e.name)
        raise user_input_error("Name must be unique", e.name) from e
    except ValidationError as e:
        logger.info("Rejected invalid person", errors=e.errors)
        raise user_input_error(str(e), e.invalid_args) from e

    return _to_person(record)


async def edit_number(info: strawberry.Info, *, name: str, phone: str) -> Person | None:
    store = get_store_from_info(info)

    try:
        update = validate_phone_update(name=name, phone=phone)
    except ValidationError as e:
        # An unknown name is not an error, whatever the phone looks like
        if await store.find_by_name(name) is None:
            return None
        logger.info("Rejected invalid phone number", errors=e.errors)
        raise user_input_error(str(e), e.invalid_args) from e

    record = await store.update_phone_by_name(update)
    if record is None:
        logger.debug("Person not found for phone update", name=name)
        return None
    return _to_person(record)


# Person field resolvers
def resolve_person_address(person: Person) -> Address:
    from ..types.person import Address as AddressType

    address = address_of(person.record)
    return AddressType(street=address.street, city=address.city)
