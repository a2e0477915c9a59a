"""In-memory person store."""

import asyncio
import uuid
from collections.abc import Iterable

from ..logging import get_logger
from .base import (
    DuplicateNameError,
    PersonDraft,
    PersonRecord,
    PersonStore,
    PhoneUpdate,
    matches_phone_filter,
)

logger = get_logger(__name__)


class InMemoryPersonStore(PersonStore):
    """Keeps persons in a list for the lifetime of the process.

    Insertion order is preserved. Writes hold a lock so that the name
    uniqueness check and the write happen atomically.
    """

    name = "memory"

    def __init__(self, initial: Iterable[PersonRecord] = ()):
        self._persons: list[PersonRecord] = list(initial)
        self._lock = asyncio.Lock()

    async def count(self) -> int:
        return len(self._persons)

    async def list_all(self, has_phone: bool | None = None) -> list[PersonRecord]:
        return [p for p in self._persons if matches_phone_filter(p, has_phone)]

    async def find_by_name(self, name: str) -> PersonRecord | None:
        return self._find(name)

    async def insert(self, draft: PersonDraft) -> PersonRecord:
        async with self._lock:
            if self._find(draft.name) is not None:
                raise DuplicateNameError(draft.name)

            person = PersonRecord(
                id=str(uuid.uuid4()),
                name=draft.name,
                phone=draft.phone,
                street=draft.street,
                city=draft.city,
            )
            self._persons.append(person)

        logger.info("Person added", person_id=person.id, store=self.name)
        return person

    async def update_phone_by_name(self, update: PhoneUpdate) -> PersonRecord | None:
        async with self._lock:
            for index, person in enumerate(self._persons):
                if person.name == update.name:
                    updated = person.with_phone(update.phone)
                    self._persons[index] = updated
                    break
            else:
                return None

        logger.info("Person phone updated", person_id=updated.id, store=self.name)
        return updated

    def _find(self, name: str) -> PersonRecord | None:
        return next((p for p in self._persons if p.name == name), None)
