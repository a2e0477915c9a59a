"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.person import Person


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addPerson")
    async def add_person(
        self,
        info: strawberry.Info,
        name: str,
        street: str,
        city: str,
        phone: str | None = None,
    ) -> Person | None:
        """Add a new person."""
        from ..resolvers.person import add_person

        return await add_person(info, name=name, phone=phone, street=street, city=city)

    @strawberry.mutation(name="editNumber")
    async def edit_number(self, info: strawberry.Info, name: str, phone: str) -> Person | None:
        """Change the phone number of an existing person."""
        from ..resolvers.person import edit_number

        return await edit_number(info, name=name, phone=phone)
