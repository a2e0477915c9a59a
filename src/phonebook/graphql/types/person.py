"""
Person GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...store.base import PersonRecord


@strawberry.enum
class YesNo(Enum):
    """Phone presence filter."""

    YES = "YES"
    NO = "NO"


@strawberry.type
class Address:
    """Address type for GraphQL API."""

    street: str
    city: str


@strawberry.type
class Person:
    """Person type for GraphQL API."""

    name: str
    phone: str | None
    id: strawberry.ID
    record: strawberry.Private[PersonRecord]

    @strawberry.field
    def address(self) -> Address:
        """Address derived from the stored street and city."""
        from ..resolvers.person import resolve_person_address

        return resolve_person_address(self)

    @classmethod
    def from_record(cls, record: PersonRecord) -> "Person":
        return cls(
            name=record.name,
            phone=record.phone,
            id=strawberry.ID(record.id),
            record=record,
        )
