"""Persistent person store backed by SQLAlchemy."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database.connection import get_async_session
from ..dbmodels import Persons
from ..logging import get_logger
from .base import DuplicateNameError, PersonDraft, PersonRecord, PersonStore, PhoneUpdate

logger = get_logger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def _to_record(row: Persons) -> PersonRecord:
    return PersonRecord(
        id=str(row.id),
        name=row.name,
        phone=row.phone,
        street=row.street,
        city=row.city,
    )


def _is_name_conflict(error: IntegrityError) -> bool:
    message = str(error.orig)
    return "persons_name_key" in message or "persons.name" in message


class DatabasePersonStore(PersonStore):
    """Stores persons in the ``persons`` table.

    Name uniqueness is enforced by the table's unique constraint; a lost race
    between two inserts surfaces as DuplicateNameError like a plain duplicate.
    """

    name = "database"

    def __init__(self, session_factory: SessionFactory = get_async_session):
        self._session_factory = session_factory

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count()).select_from(Persons))
            return result.scalar_one()

    async def list_all(self, has_phone: bool | None = None) -> list[PersonRecord]:
        stmt = select(Persons).order_by(Persons.created_at, Persons.id)
        if has_phone is True:
            stmt = stmt.where(Persons.phone.is_not(None), Persons.phone != "")
        elif has_phone is False:
            stmt = stmt.where((Persons.phone.is_(None)) | (Persons.phone == ""))

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [_to_record(row) for row in result.scalars().all()]

    async def find_by_name(self, name: str) -> PersonRecord | None:
        async with self._session_factory() as session:
            row = await self._get_by_name(session, name)
            return _to_record(row) if row else None

    async def insert(self, draft: PersonDraft) -> PersonRecord:
        async with self._session_factory() as session:
            if await self._get_by_name(session, draft.name) is not None:
                raise DuplicateNameError(draft.name)

            row = Persons(
                name=draft.name,
                phone=draft.phone,
                street=draft.street,
                city=draft.city,
            )
            session.add(row)
            try:
                await session.flush()
            except IntegrityError as e:
                if _is_name_conflict(e):
                    raise DuplicateNameError(draft.name) from e
                raise

            person = _to_record(row)

        logger.info("Person added", person_id=person.id, store=self.name)
        return person

    async def update_phone_by_name(self, update: PhoneUpdate) -> PersonRecord | None:
        async with self._session_factory() as session:
            row = await self._get_by_name(session, update.name)
            if row is None:
                return None

            row.phone = update.phone
            await session.flush()
            person = _to_record(row)

        logger.info("Person phone updated", person_id=person.id, store=self.name)
        return person

    @staticmethod
    async def _get_by_name(session: AsyncSession, name: str) -> Persons | None:
        result = await session.execute(select(Persons).where(Persons.name == name))
        return result.scalar_one_or_none()
