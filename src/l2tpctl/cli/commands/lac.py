"""LAC (access concentrator) commands."""

from typing import Annotated

import typer

from l2tpctl.cli.commands._args import OptionsArg, TunnelArg
from l2tpctl.cli.client import encode_or_exit, execute_request
from l2tpctl.cli.output import print_warning
from l2tpctl.models.enums import RequestKind
from l2tpctl.protocol import build_add_request, build_request, validate_tunnel_name
from l2tpctl.utils.logger import get_logger

logger = get_logger(__name__)


def add_lac(tunnel: TunnelArg, options: OptionsArg = None):
    """Add a new or modify an existing LAC configuration."""
    request = encode_or_exit(
        build_add_request, RequestKind.LAC_ADD_MODIFY, tunnel, options or []
    )
    execute_request(request)


def connect_lac(
    tunnel: TunnelArg,
    username: Annotated[
        str | None, typer.Argument(help="Username for the tunnel")
    ] = None,
    secret: Annotated[str | None, typer.Argument(help="Secret for the tunnel")] = None,
):
    """Try to activate the tunnel."""
    encode_or_exit(validate_tunnel_name, tunnel)
    # The daemon's control protocol has no connect request yet
    logger.debug(
        f"connect {tunnel}: username={'set' if username else 'unset'}, "
        f"secret={'set' if secret else 'unset'}"
    )
    print_warning("connect is not supported by the control socket, nothing sent")


def disconnect_lac(tunnel: TunnelArg):
    """Disconnect the tunnel."""
    execute_request(encode_or_exit(build_request, RequestKind.LAC_DISCONNECT, tunnel))


def remove_lac(tunnel: TunnelArg):
    """Remove a LAC configuration. The daemon disconnects the tunnel first."""
    execute_request(encode_or_exit(build_request, RequestKind.LAC_REMOVE, tunnel))


def status_lac(tunnel: TunnelArg):
    """Show LAC tunnel status."""
    execute_request(encode_or_exit(build_request, RequestKind.LAC_STATUS, tunnel))
