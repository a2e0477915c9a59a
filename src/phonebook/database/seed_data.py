"""
Seed data functions for database initialization.
"""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Persons
from ..logging import get_logger
from ..store.base import PersonRecord
from ..store.seed import SAMPLE_PERSONS

logger = get_logger(__name__)


async def seed_persons(
    db: AsyncSession, persons: Iterable[PersonRecord] = SAMPLE_PERSONS
) -> int:
    """
    Insert persons whose names are not yet stored.

    Seed rows are pre-existing data and bypass field validation.

    Returns:
        Number of persons inserted
    """
    inserted = 0
    for person in persons:
        stmt = select(Persons.id).where(Persons.name == person.name)
        result = await db.execute(stmt)
        if result.scalar_one_or_none() is not None:
            logger.debug("Person already exists", name=person.name)
            continue

        db.add(
            Persons(
                id=UUID(person.id),
                name=person.name,
                phone=person.phone,
                street=person.street,
                city=person.city,
            )
        )
        # Flush per row so created_at keeps the seed order
        await db.flush()
        inserted += 1

    logger.info("Seeded persons", inserted=inserted)
    return inserted
