"""
Root GraphQL query definitions
"""

import strawberry

from ..types.person import Person, YesNo


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def person_count(self, info: strawberry.Info) -> int:
        """Get the number of stored persons."""
        from ..resolvers.person import resolve_person_count

        return await resolve_person_count(info)

    @strawberry.field
    async def all_persons(
        self, info: strawberry.Info, phone: YesNo | None = None
    ) -> list[Person | None]:
        """Get all persons, optionally filtered by whether they have a phone."""
        from ..resolvers.person import resolve_all_persons

        return await resolve_all_persons(info, phone)

    @strawberry.field
    async def find_person(self, info: strawberry.Info, name: str) -> Person | None:
        """Find a person by exact name."""
        from ..resolvers.person import resolve_find_person

        return await resolve_find_person(info, name)
