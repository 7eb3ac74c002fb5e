"""CLI main entry point using Typer."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from mddocs.config.models import ServerConfig
from mddocs.config.settings import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_BASE_PATH,
    DEFAULT_SERVER_PORT,
    DEFAULT_SERVER_TITLE,
)
from mddocs.server.app import start_docs_server
from mddocs.server.banner import print_banner

app = typer.Typer(
    name="mddocs",
    help="Serve a directory of Markdown files as styled HTML pages",
    add_completion=False,
)

console = Console()


def configure_logging(level: str) -> None:
    """Route log records through Rich at the given level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )


@app.command()
def serve(
    docs_dir: Path = typer.Argument(
        ...,
        help="Directory of Markdown files to serve",
    ),
    base_path: str = typer.Option(
        DEFAULT_SERVER_BASE_PATH,
        "--base-path",
        "-b",
        help="URL prefix the docs are served under",
    ),
    title: str = typer.Option(
        DEFAULT_SERVER_TITLE,
        "--title",
        "-t",
        help="HTML page title",
    ),
    port: int = typer.Option(
        DEFAULT_SERVER_PORT,
        "--port",
        "-p",
        help="Port to bind server (1-65535)",
    ),
    host: str = typer.Option(
        DEFAULT_HOST,
        "--host",
        help="Host to bind server",
    ),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        "-l",
        help="Logging level (DEBUG/INFO/WARNING/ERROR)",
    ),
) -> None:
    """Start the documentation server."""
    if not docs_dir.exists():
        console.print(f"[red]✗[/red] Path not found: {docs_dir}", style="bold")
        raise typer.Exit(code=3)

    config = ServerConfig(
        docs_dir=docs_dir,
        base_path=base_path,
        title=title,
        port=port,
        host=host,
        log_level=log_level,
    )

    try:
        config.validate()
    except ValueError as e:
        console.print(f"[red]✗[/red] Configuration error: {e}", style="bold")
        raise typer.Exit(code=2)

    configure_logging(config.log_level)
    print_banner(config)

    try:
        start_docs_server(config)
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped[/yellow]")
        raise typer.Exit(code=0)
    except OSError as e:
        if "address already in use" in str(e).lower():
            console.print(f"[red]✗[/red] Port {port} is already in use", style="bold")
            raise typer.Exit(code=5)
        console.print(f"[red]✗[/red] Error: {e}", style="bold")
        raise typer.Exit(code=1)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
