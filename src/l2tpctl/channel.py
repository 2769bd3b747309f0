"""
Daemon control channel.

One ControlChannel performs exactly one request/response exchange over the
daemon's local stream socket:

    UNCONNECTED -> CONNECTED -> REQUEST_SENT -> DRAINING -> CLOSED

Any failure releases the socket before the error reaches the caller. There
are no retries; the response ends when the daemon closes its side.
"""

import socket
from collections.abc import Callable
from enum import Enum

from l2tpctl.config import DEFAULT_RECV_CHUNK_SIZE
from l2tpctl.exceptions import (
    ChannelConnectionError,
    ReceiveError,
    TransmissionError,
)
from l2tpctl.utils.logger import get_logger

logger = get_logger(__name__)


class ChannelState(Enum):
    """Lifecycle of a control channel."""

    UNCONNECTED = "unconnected"
    CONNECTED = "connected"
    REQUEST_SENT = "request_sent"
    DRAINING = "draining"
    CLOSED = "closed"


class ControlChannel:
    """
    Blocking client for the daemon control socket.

    Usage:
        with ControlChannel("/var/run/xl2tpd/l2tp-control") as channel:
            channel.send("s mytunnel")
            channel.receive_all(sys.stdout.buffer.write)
    """

    def __init__(
        self,
        path: str,
        timeout: float | None = None,
        chunk_size: int = DEFAULT_RECV_CHUNK_SIZE,
    ):
        """
        Initialize the channel without connecting.

        Args:
            path: Filesystem path of the control socket.
            timeout: Per-operation socket timeout, None blocks indefinitely.
            chunk_size: Maximum bytes per read while draining.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.path = path
        self.timeout = timeout
        self.chunk_size = chunk_size
        self.state = ChannelState.UNCONNECTED
        self._sock: socket.socket | None = None

    def __enter__(self) -> "ControlChannel":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Lifecycle ---

    def connect(self) -> None:
        """
        Connect to the control socket.

        Raises:
            ChannelConnectionError: Socket missing, refusing, or timed out.
        """
        if self.state is not ChannelState.UNCONNECTED:
            message = f"channel is {self.state.value}"
            self.close()
            raise ChannelConnectionError(message, self.path)

        logger.debug(f"Connecting to control socket {self.path}")
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.settimeout(self.timeout)
            sock.connect(self.path)
        except socket.timeout:
            sock.close()
            self.state = ChannelState.CLOSED
            raise ChannelConnectionError("timed out", self.path)
        except OSError as e:
            sock.close()
            self.state = ChannelState.CLOSED
            raise ChannelConnectionError(e.strerror or str(e), self.path) from e

        self._sock = sock
        self.state = ChannelState.CONNECTED

    def close(self) -> None:
        """Release the socket. Safe to call more than once."""
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None
                logger.debug(f"Closed control socket {self.path}")
        self.state = ChannelState.CLOSED

    # --- Exchange ---

    def send(self, request: str) -> None:
        """
        Write one encoded request line.

        Raises:
            TransmissionError: Channel not connected, or the write failed.
        """
        if self.state is not ChannelState.CONNECTED:
            message = f"cannot send request: channel is {self.state.value}"
            self.close()
            raise TransmissionError(message)

        # Undecodable argv bytes come back as surrogates; send them unchanged
        payload = request.encode("utf-8", "surrogateescape")
        logger.debug(f"Sending request ({len(payload)} bytes): {request}")
        try:
            self._sock.sendall(payload)
        except socket.timeout:
            self.close()
            raise TransmissionError("send timed out")
        except OSError as e:
            self.close()
            raise TransmissionError(f"send failed: {e.strerror or e}") from e

        self.state = ChannelState.REQUEST_SENT

    def _read_chunk(self) -> bytes:
        try:
            return self._sock.recv(self.chunk_size)
        except socket.timeout:
            raise ReceiveError("receive timed out")
        except OSError as e:
            raise ReceiveError(f"receive failed: {e.strerror or e}") from e

    def receive_all(self, sink: Callable[[bytes], object]) -> int:
        """
        Forward response chunks to a sink until the daemon closes.

        A read error ends the response the same way a close does; it is
        logged, not raised.

        Args:
            sink: Called once per non-empty chunk, in arrival order.

        Returns:
            Total number of bytes forwarded.
        """
        if self.state is not ChannelState.REQUEST_SENT:
            message = f"cannot receive response: channel is {self.state.value}"
            self.close()
            raise ReceiveError(message)

        self.state = ChannelState.DRAINING
        total = 0
        while True:
            try:
                chunk = self._read_chunk()
            except ReceiveError as e:
                logger.debug(f"Response truncated: {e}")
                break
            if not chunk:
                break
            sink(chunk)
            total += len(chunk)

        logger.debug(f"Received {total} response bytes")
        self.close()
        return total

    def exchange(self, request: str, sink: Callable[[bytes], object]) -> int:
        """Send a request and drain the whole response into the sink."""
        self.send(request)
        return self.receive_all(sink)
