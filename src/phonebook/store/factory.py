"""Factory for creating the configured person store."""

from ..config import Settings, settings
from ..logging import get_logger
from .base import PersonStore
from .memory import InMemoryPersonStore
from .seed import SAMPLE_PERSONS

logger = get_logger(__name__)

# Process-wide store, created on first use
_person_store: PersonStore | None = None


def create_person_store(config: Settings | None = None) -> PersonStore:
    """Create a person store from configuration.

    Args:
        config: Settings to read; defaults to the global settings

    Returns:
        PersonStore instance

    Raises:
        ValueError: If the configured backend is unknown
    """
    config = config or settings
    backend = config.store_backend

    if backend == "memory":
        initial = SAMPLE_PERSONS if config.seed_memory_store else ()
        store: PersonStore = InMemoryPersonStore(initial)
    elif backend == "remote":
        from .remote import RemotePersonStore

        store = RemotePersonStore(config.remote_api_url, timeout=config.remote_timeout)
    elif backend == "database":
        from .database import DatabasePersonStore

        store = DatabasePersonStore()
    else:
        raise ValueError(f"Unknown person store backend: {backend}")

    logger.info("Person store created", backend=backend)
    return store


def get_person_store() -> PersonStore:
    """Get the shared person store, creating it on first access."""
    global _person_store

    if _person_store is None:
        _person_store = create_person_store()
    return _person_store


def set_person_store(store: PersonStore | None) -> None:
    """Replace the shared person store (None forgets it)."""
    global _person_store
    _person_store = store


async def close_person_store() -> None:
    """Close and forget the shared person store."""
    global _person_store

    if _person_store is not None:
        await _person_store.close()
        _person_store = None
