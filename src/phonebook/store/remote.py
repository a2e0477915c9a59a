"""Read-only person store backed by a remote REST source."""

from typing import Any

import httpx

from ..logging import get_logger
from .base import (
    PersonDraft,
    PersonRecord,
    PersonStore,
    PhoneUpdate,
    ReadOnlyStoreError,
    StoreError,
    matches_phone_filter,
)

logger = get_logger(__name__)


def _record_from_payload(item: dict[str, Any]) -> PersonRecord:
    try:
        return PersonRecord(
            id=str(item["id"]),
            name=item["name"],
            phone=item.get("phone") or None,
            street=item["street"],
            city=item["city"],
        )
    except KeyError as e:
        raise StoreError(f"Remote person is missing field {e.args[0]!r}") from e


class RemotePersonStore(PersonStore):
    """Fetches persons from ``GET {base_url}/persons`` on every read.

    The remote source has no write contract, so mutations raise
    ReadOnlyStoreError.
    """

    name = "remote"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def _fetch(self) -> list[PersonRecord]:
        response = await self._client.get("/persons")
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, list):
            raise StoreError("Remote person source did not return a list")

        logger.debug("Fetched remote persons", count=len(payload), base_url=self.base_url)
        return [_record_from_payload(item) for item in payload]

    async def count(self) -> int:
        return len(await self._fetch())

    async def list_all(self, has_phone: bool | None = None) -> list[PersonRecord]:
        return [p for p in await self._fetch() if matches_phone_filter(p, has_phone)]

    async def find_by_name(self, name: str) -> PersonRecord | None:
        return next((p for p in await self._fetch() if p.name == name), None)

    async def insert(self, draft: PersonDraft) -> PersonRecord:
        raise ReadOnlyStoreError("The remote person source is read-only")

    async def update_phone_by_name(self, update: PhoneUpdate) -> PersonRecord | None:
        if await self.find_by_name(update.name) is None:
            return None
        raise ReadOnlyStoreError("The remote person source is read-only")

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
