#!/usr/bin/env python3
"""
Main CLI entry point for the Phonebook server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from phonebook import __version__
from phonebook.config import settings
from phonebook.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="phonebook")
def cli() -> None:
    """Phonebook CLI - run the GraphQL server and manage its database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=4000, type=int, help="Port to bind to (default: 4000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--store",
    "store_backend",
    default=None,
    type=click.Choice(["memory", "remote", "database"]),
    help="Person store backend (default: from PHONEBOOK_STORE_BACKEND)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    store_backend: str | None,
    log_level: str,
) -> None:
    """Start the Phonebook API server."""
    configure_logging(debug=(log_level == "debug"))

    # The in-process app reads the shared settings; reloaded workers read the environment
    if store_backend:
        settings.store_backend = store_backend
        os.environ["PHONEBOOK_STORE_BACKEND"] = store_backend
    if log_level == "debug":
        os.environ["PHONEBOOK_DEBUG"] = "true"
        os.environ["PHONEBOOK_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("PHONEBOOK_DEBUG", "false")
        os.environ.setdefault("PHONEBOOK_LOG_LEVEL", log_level)

    logger.info(
        "Starting Phonebook API server",
        host=host,
        port=port,
        reload=reload,
        store_backend=store_backend,
        log_level=log_level,
    )

    try:
        uvicorn.run(
            "phonebook.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option("--database-url", default=None, help="Database URL (default: from settings)")
def init_db(database_url: str | None) -> None:
    """Create the person tables."""
    from phonebook.database.connection import create_tables, dispose_database, init_database

    configure_logging()

    async def do_init():
        init_database(database_url)
        try:
            await create_tables()
        finally:
            await dispose_database()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Tables created")


@cli.command()
@click.option("--database-url", default=None, help="Database URL (default: from settings)")
def seed(database_url: str | None) -> None:
    """Insert the sample persons into the database."""
    from phonebook.database.connection import (
        create_tables,
        dispose_database,
        get_async_session,
        init_database,
    )
    from phonebook.database.seed_data import seed_persons

    configure_logging()

    async def do_seed() -> int:
        init_database(database_url)
        try:
            await create_tables()
            async with get_async_session() as db:
                return await seed_persons(db)
        finally:
            await dispose_database()

    try:
        inserted = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed persons", error=str(e))
        click.echo(f"✗ Error seeding persons: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Seeded {inserted} person(s)")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
