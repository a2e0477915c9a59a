"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from phonebook.store import InMemoryPersonStore, PersonStore
from phonebook.store.seed import SAMPLE_PERSONS

ExecuteFn = Callable[..., Awaitable[Any]]


@pytest.fixture
def memory_store() -> InMemoryPersonStore:
    """In-memory store holding the three sample persons."""
    return InMemoryPersonStore(SAMPLE_PERSONS)


@pytest.fixture
def empty_store() -> InMemoryPersonStore:
    return InMemoryPersonStore()


@pytest.fixture
def execute(memory_store: InMemoryPersonStore) -> ExecuteFn:
    """Run a GraphQL document against the schema with an injected store."""
    from phonebook.graphql.schema import schema

    async def _execute(
        query: str,
        variables: dict[str, Any] | None = None,
        store: PersonStore | None = None,
    ) -> Any:
        return await schema.execute(
            query,
            variable_values=variables,
            context_value={"store": store or memory_store},
        )

    return _execute


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'phonebook.db'}"


@pytest_asyncio.fixture
async def sqlite_database(sqlite_url: str) -> AsyncGenerator[str, None]:
    """Initialize the shared engine against a fresh SQLite file with tables created."""
    from phonebook.database.connection import create_tables, dispose_database, init_database

    init_database(sqlite_url, force_reinit=True)
    await create_tables()
    yield sqlite_url
    await dispose_database()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_shared_store() -> Generator[None, None, None]:
    """Forget the process-wide person store between tests."""
    from phonebook.store import set_person_store

    set_person_store(None)
    yield
    set_person_store(None)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(  # type: ignore[reportUnknownMemberType]
        "markers", "requires_db: mark test as requiring database connection"
    )
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
