"""Startup banner."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from mddocs.config.models import ServerConfig

console = Console()


def print_banner(config: ServerConfig) -> None:
    """Print server address and settings."""
    url = f"http://localhost:{config.port}{config.base_path}"

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("URL", f"[link={url}]{url}[/link]")
    table.add_row("Serving", str(config.root_dir))
    table.add_row("Title", config.title)
    table.add_row("Bind", f"{config.host}:{config.port}")

    console.print(Panel(table, title="[bold blue]mddocs[/bold blue]", expand=False))
