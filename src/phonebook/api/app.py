"""
Main FastAPI application for the Phonebook service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import PersonStore, close_person_store, get_person_store

configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


async def prepare_database() -> None:
    """Check connectivity and create tables for the database store."""
    from ..database.connection import check_database_connection, create_tables

    ok, error = await check_database_connection()
    if not ok:
        logger.error("Database unavailable", error=error)
        raise RuntimeError(error or "Database unavailable")

    await create_tables()


def create_app(store: PersonStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Person store to serve; defaults to the configured shared store
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Phonebook API...", store_backend=settings.store_backend)
        if store is None and settings.store_backend == "database":
            await prepare_database()
            logger.info("Database ready")

        yield

        logger.info("Shutting down Phonebook API...")
        if store is None:
            await close_person_store()
            if settings.store_backend == "database":
                from ..database.connection import dispose_database

                await dispose_database()

    app = FastAPI(
        title="Phonebook API",
        description="GraphQL address book with pluggable person stores",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        active = store or get_person_store()
        return {"status": "healthy", "version": __version__, "store": active.name}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        app.include_router(create_graphql_router(store), prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "phonebook.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
