#!/usr/bin/env python3
"""
Main CLI entry point for the Roster server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn

from roster import __version__
from roster.config import settings
from roster.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="roster")
def cli() -> None:
    """Roster CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    show_default=True,
    type=int,
    help="Port to bind to",
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
    """Start the Roster API server.

    Runs a single worker: the user store lives in process memory.
    """
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Roster API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads these when imported by the reloader
    if log_level == "debug":
        os.environ["ROSTER_DEBUG"] = "true"
        os.environ["ROSTER_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("ROSTER_DEBUG", "false")
        os.environ.setdefault("ROSTER_LOG_LEVEL", log_level)

    try:
        if reload:
            uvicorn.run(
                "roster.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from roster.api.app import app

            # Importing the app configures logging from settings; the flag wins
            configure_logging(debug=(log_level == "debug"), level=log_level)

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def export_schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from roster.graphql.schema import export_schema_sdl

    sdl = export_schema_sdl()

    if output is None:
        click.echo(sdl)
        return

    output.write_text(sdl + "\n", encoding="utf-8")
    click.echo(f"Schema written to {output}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
