"""
Request execution for CLI commands.

Commands encode their request with encode_or_exit and pass the line to
execute_request, which owns the control channel until the response ends.
"""

import sys

import typer

from l2tpctl.channel import ControlChannel
from l2tpctl.config import config
from l2tpctl.exceptions import ControlError
from l2tpctl.cli.output import print_error
from l2tpctl.utils.logger import format_traceback, get_logger

logger = get_logger(__name__)


def _stdout_sink(chunk: bytes) -> None:
    stream = sys.stdout.buffer
    stream.write(chunk)
    stream.flush()


def execute_request(request: str) -> int:
    """
    Send a request to the daemon and copy its response to stdout.

    Returns:
        Number of response bytes written.

    Raises:
        typer.Exit: Connecting or sending failed.
    """
    sys.stdout.flush()
    try:
        with ControlChannel(
            config.CONTROL_FILE,
            timeout=config.TIMEOUT,
            chunk_size=config.RECV_CHUNK_SIZE,
        ) as channel:
            return channel.exchange(request, _stdout_sink)
    except ControlError as e:
        print_error(str(e))
        logger.debug(f"Traceback:\n{format_traceback(e)}")
        raise typer.Exit(1)


def encode_or_exit(build, *args) -> str:
    """
    Run a request builder, turning encoding errors into a CLI failure.

    Nothing is sent when encoding fails.
    """
    try:
        request = build(*args)
    except ControlError as e:
        print_error(str(e))
        raise typer.Exit(1)
    logger.debug(f"Encoded: {request}")
    return request
