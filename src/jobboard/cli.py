#!/usr/bin/env python3
"""
Main CLI entry point for the job board backend.
"""

import asyncio
import os
import sys

import click
import uvicorn

from jobboard import __version__
from jobboard.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="jobboard")
def cli() -> None:
    """Job board CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=9000, type=int, help="Port to bind to (default: 9000)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the job board API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info("Starting job board API server", host=host, port=port, reload=reload)

    # The app reads its settings at import time, so pass them through the environment
    if log_level == "debug":
        os.environ["JOBBOARD_DEBUG"] = "true"
        os.environ["JOBBOARD_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("JOBBOARD_DEBUG", "false")
        os.environ.setdefault("JOBBOARD_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "jobboard.api.app:app",
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
def init_db() -> None:
    """Create all database tables."""
    from jobboard.database.connection import create_tables, get_async_engine

    configure_logging()

    async def do_init() -> None:
        await create_tables()
        await get_async_engine().dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database tables created")


@cli.command()
def seed() -> None:
    """Load sample companies, users and jobs."""
    from jobboard.database.connection import create_tables, get_async_engine, get_async_session
    from jobboard.database.seed_data import seed_sample_data

    configure_logging()

    async def do_seed() -> dict[str, int]:
        await create_tables()
        async with get_async_session() as db:
            counts = await seed_sample_data(db)
        await get_async_engine().dispose()
        return counts

    try:
        counts = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed sample data", error=str(e))
        click.echo(f"✗ Error seeding data: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Sample data loaded")
    for table, count in counts.items():
        click.echo(f"  {table}: {count}")


if __name__ == "__main__":
    cli()
