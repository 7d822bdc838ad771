#!/usr/bin/env python3
"""
Main CLI entry point for the jydb backend server.
"""

import os
import sys

import click
import uvicorn

from jydb import __version__
from jydb.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="jydb")
def cli() -> None:
    """jydb CLI - run the server and inspect the GraphQL schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the jydb API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting jydb API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads its settings at import time
    if log_level == "debug":
        os.environ["JYDB_DEBUG"] = "true"
        os.environ["JYDB_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("JYDB_DEBUG", "false")
        os.environ.setdefault("JYDB_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "jydb.api.app:app",
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


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to a file instead of stdout",
)
def export_schema(output: str | None) -> None:
    """Print the GraphQL schema (SDL)."""
    from jydb.graphql.schema import schema

    sdl = str(schema)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
