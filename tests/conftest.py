"""
Pytest configuration and fixtures for l2tpctl tests.
"""

import socket
import tempfile
import threading
import time
from dataclasses import replace
from pathlib import Path
from typing import Generator

import pytest

from l2tpctl import config as config_module
from l2tpctl.models.enums import LogLevel
from l2tpctl.utils.logger import configure_logging


class FakeDaemon:
    """
    Single-connection control socket server.

    Reads one request, writes the canned response chunks one at a time and
    closes the connection, like the daemon does. With ``hold`` the
    connection stays open that many seconds after the last chunk.
    """

    def __init__(
        self, path: Path, chunks: list[bytes] | None = None, hold: float = 0
    ):
        self.path = path
        self.hold = hold
        self.chunks = chunks if chunks is not None else [b"OK\n"]
        self.requests: list[bytes] = []
        self.connections = 0
        self._stopping = False
        self._server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        self._thread = threading.Thread(target=self._serve, daemon=True)

    def start(self) -> "FakeDaemon":
        self._server.bind(str(self.path))
        self._server.listen(1)
        self._server.settimeout(5)
        self._thread.start()
        return self

    def _serve(self) -> None:
        try:
            conn, _ = self._server.accept()
        except OSError:
            return
        if self._stopping:
            conn.close()
            return
        self.connections += 1
        with conn:
            self.requests.append(conn.recv(4096))
            for chunk in self.chunks:
                try:
                    conn.sendall(chunk)
                except OSError:
                    # Client went away without reading
                    return
                # Give the client a chance to read chunks separately
                time.sleep(0.02)
            # Keep the connection open without answering further
            time.sleep(self.hold)

    def stop(self) -> None:
        self._stopping = True
        if self._thread.is_alive():
            # Unblock a pending accept
            with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as poke:
                try:
                    poke.connect(str(self.path))
                except OSError:
                    pass
        self._server.close()
        self._thread.join(timeout=5)

    @property
    def request(self) -> str:
        return self.requests[0].decode("utf-8") if self.requests else ""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a short temporary directory (AF_UNIX paths are length limited)."""
    with tempfile.TemporaryDirectory(prefix="l2tp") as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def control_path(temp_dir: Path) -> Path:
    return temp_dir / "l2tp-control"


@pytest.fixture
def fake_daemon(control_path: Path) -> Generator[FakeDaemon, None, None]:
    """Running fake daemon with a one-chunk response."""
    daemon = FakeDaemon(control_path).start()
    yield daemon
    daemon.stop()


@pytest.fixture
def make_daemon(control_path: Path):
    """Factory for fake daemons with custom response chunks."""
    daemons = []

    def _make(chunks: list[bytes], hold: float = 0) -> FakeDaemon:
        daemon = FakeDaemon(control_path, chunks, hold=hold).start()
        daemons.append(daemon)
        return daemon

    yield _make
    for daemon in daemons:
        daemon.stop()


@pytest.fixture(autouse=True)
def restore_config() -> Generator[None, None, None]:
    """Undo CLI changes to the global config and logging between tests."""
    saved = replace(config_module.config)
    yield
    for name in ("CONTROL_FILE", "TIMEOUT", "RECV_CHUNK_SIZE", "LOG_LEVEL"):
        setattr(config_module.config, name, getattr(saved, name))
    configure_logging(LogLevel.WARNING)
