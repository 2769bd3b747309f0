"""
l2tpctl CLI entry point.

Usage:
    l2tpctl [-c PATH] [-d] COMMAND TUNNEL [OPTIONS]...

Commands:
    add-lac      Add or modify a LAC configuration (alias: add)
    connect-lac  Activate a tunnel (alias: connect)
    disconnect-lac
                 Disconnect a tunnel (alias: disconnect)
    remove-lac   Remove a LAC configuration (alias: remove)
    add-lns      Add or modify an LNS configuration
    remove-lns   Remove an LNS configuration
    status       LAC tunnel status
    status-lns   LNS status
    available    Ask the daemon what is available
"""

from typing import Annotated

import typer

from l2tpctl.cli.client import encode_or_exit, execute_request
from l2tpctl.cli.commands import config_cmd, lac, lns
from l2tpctl.cli.output import console
from l2tpctl.config import config
from l2tpctl.models.enums import LogLevel, RequestKind
from l2tpctl.protocol import build_request
from l2tpctl.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="l2tpctl",
    help=(
        "xl2tpd control client.\n\n"
        "Configuration for add commands is given as <key>=<value> pairs, "
        "see xl2tpd.conf(5) for available options."
    ),
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"token_normalize_func": lambda token: token.lower()},
)

# Keep the short command names for backwards compat
app.command("add")(lac.add_lac)
app.command("connect")(lac.connect_lac)
app.command("disconnect")(lac.disconnect_lac)
app.command("remove")(lac.remove_lac)

# LAC commands
app.command("add-lac")(lac.add_lac)
app.command("connect-lac")(lac.connect_lac)
app.command("disconnect-lac")(lac.disconnect_lac)
app.command("remove-lac")(lac.remove_lac)

# LNS commands
app.command("add-lns")(lns.add_lns)
app.command("remove-lns")(lns.remove_lns)

# Generic commands
app.command("status")(lac.status_lac)
app.command("status-lns")(lns.status_lns)

app.add_typer(config_cmd.app, name="config", help="Configuration")


def _check_timeout(value: float | None) -> float | None:
    if value is not None and value <= 0:
        raise typer.BadParameter("must be greater than 0")
    return value


@app.callback()
def main(
    control_file: Annotated[
        str | None,
        typer.Option(
            "--control-file",
            "-c",
            help="xl2tpd control socket",
            envvar="L2TPCTL_CONTROL_FILE",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option("--debug", "-d", help="Print debug diagnostics"),
    ] = False,
    timeout: Annotated[
        float | None,
        typer.Option(
            "--timeout",
            "-t",
            help="Socket timeout in seconds (default: wait forever)",
            envvar="L2TPCTL_TIMEOUT",
            callback=_check_timeout,
        ),
    ] = None,
):
    """
    xl2tpd control client.

    Sends one request to the running daemon and prints its response.
    """
    if control_file:
        config.CONTROL_FILE = control_file
    if timeout is not None:
        config.TIMEOUT = timeout
    if debug:
        config.LOG_LEVEL = LogLevel.DEBUG

    configure_logging(config.LOG_LEVEL)
    logger.debug(f"Control file set to {config.CONTROL_FILE}")


@app.command("available")
def available(
    tunnel: Annotated[
        str | None, typer.Argument(help="Tunnel name (optional)")
    ] = None,
):
    """Ask the daemon which tunnels are available."""
    execute_request(encode_or_exit(build_request, RequestKind.AVAILABLE, tunnel))


@app.command("version")
def version():
    """Show version information."""
    from l2tpctl import __version__

    console.print(f"l2tpctl v{__version__}")


def run():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
