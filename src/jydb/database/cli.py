#!/usr/bin/env python3
"""
CLI entry point for jydb database migrations and maintenance.
"""

import asyncio
import sys
from pathlib import Path

import click

from alembic import command
from alembic.config import Config
from jydb import __version__
from jydb.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Get Alembic configuration."""
    # alembic.ini lives at the project root, next to src/
    package_dir = Path(__file__).parent.parent.parent.parent
    alembic_ini = package_dir / "alembic.ini"

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    config = Config(str(alembic_ini))
    config.set_main_option("script_location", str(package_dir / "alembic"))
    return config


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="jydb-db")
def main(log_level: str) -> None:
    """jydb database migration management."""
    configure_logging(debug=(log_level == "debug"), level=log_level)


@main.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    try:
        config = get_alembic_config()
        logger.info("Upgrading database", revision=revision)
        command.upgrade(config, revision)
        logger.info("Database upgrade completed successfully")
    except Exception as e:
        logger.error("Database upgrade failed", error=str(e))
        sys.exit(1)


@main.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    try:
        config = get_alembic_config()
        logger.info("Downgrading database", revision=revision)
        command.downgrade(config, revision)
        logger.info("Database downgrade completed successfully")
    except Exception as e:
        logger.error("Database downgrade failed", error=str(e))
        sys.exit(1)


@main.command()
def current() -> None:
    """Show current database revision."""
    try:
        command.current(get_alembic_config())
    except Exception as e:
        logger.error("Failed to get current revision", error=str(e))
        sys.exit(1)


@main.command()
def history() -> None:
    """Show migration history."""
    try:
        command.history(get_alembic_config())
    except Exception as e:
        logger.error("Failed to get migration history", error=str(e))
        sys.exit(1)


async def run_gc() -> tuple[int, int]:
    """Delete unreferenced participants and animators in one transaction."""
    from jydb.database.connection import dispose_database, get_async_session
    from jydb.store.repository import collect_orphans

    try:
        async with get_async_session() as session:
            return await collect_orphans(session)
    finally:
        await dispose_database()


@main.command()
def gc() -> None:
    """Remove participants and animators no group references any more."""
    try:
        participants, animators = asyncio.run(run_gc())
    except Exception as e:
        logger.error("Orphan collection failed", error=str(e))
        click.echo(f"✗ Error collecting orphans: {e}", err=True)
        sys.exit(1)

    logger.info("Orphans collected", participants=participants, animators=animators)
    click.echo(f"✓ Removed {participants} participant(s) and {animators} animator(s)")


if __name__ == "__main__":
    main()
