"""Config management commands."""

import typer

from l2tpctl.config import config
from l2tpctl.cli.output import console

app = typer.Typer(help="Configuration commands")


@app.command("show")
def show_config():
    """Show current configuration."""
    from rich.table import Table

    table = Table(title="Current Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source")

    table.add_row(
        "CONTROL_FILE", config.CONTROL_FILE, config.source_of("CONTROL_FILE")
    )
    table.add_row(
        "TIMEOUT",
        "none" if config.TIMEOUT is None else f"{config.TIMEOUT:g}s",
        config.source_of("TIMEOUT"),
    )
    table.add_row("RECV_CHUNK_SIZE", str(config.RECV_CHUNK_SIZE), "default")
    table.add_row(
        "LOG_LEVEL", config.LOG_LEVEL.value, config.source_of("LOG_LEVEL")
    )

    console.print(table)
