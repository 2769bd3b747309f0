"""LNS (network server) commands."""

from l2tpctl.cli.commands._args import OptionsArg, TunnelArg
from l2tpctl.cli.client import encode_or_exit, execute_request
from l2tpctl.models.enums import RequestKind
from l2tpctl.protocol import build_add_request, build_request


def add_lns(tunnel: TunnelArg, options: OptionsArg = None):
    """Add a new or modify an existing LNS configuration."""
    request = encode_or_exit(
        build_add_request, RequestKind.LNS_ADD_MODIFY, tunnel, options or []
    )
    execute_request(request)


def remove_lns(tunnel: TunnelArg):
    """Remove an LNS configuration."""
    execute_request(encode_or_exit(build_request, RequestKind.LNS_REMOVE, tunnel))


def status_lns(tunnel: TunnelArg):
    """Show LNS status."""
    execute_request(encode_or_exit(build_request, RequestKind.LNS_STATUS, tunnel))
