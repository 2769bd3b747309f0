"""Argument types shared by tunnel commands."""

from typing import Annotated

import typer

TunnelArg = Annotated[str, typer.Argument(help="Tunnel name (no spaces)")]

OptionsArg = Annotated[
    list[str] | None,
    typer.Argument(
        help="Configuration as <key>=<value> pairs, see xl2tpd.conf(5)",
        show_default=False,
    ),
]
