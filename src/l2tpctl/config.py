"""
Client configuration for l2tpctl.

This module defines the configuration dataclass for the control client,
providing a centralized place for the control socket location, I/O
parameters and verbosity.

Defaults can be overridden through environment variables, and the CLI
updates the global config instance from its options before a command
runs.

Usage:
    from l2tpctl.config import config

    config.CONTROL_FILE = "/tmp/l2tp-control"
    config.LOG_LEVEL = LogLevel.DEBUG
"""

import os
from dataclasses import dataclass, field

from l2tpctl.models.enums import LogLevel

# Default daemon control socket (CONTROL_PIPE in the daemon's build)
DEFAULT_CONTROL_FILE = "/var/run/xl2tpd/l2tp-control"

# Read size for response chunks (CONTROL_PIPE_MESSAGE_SIZE)
DEFAULT_RECV_CHUNK_SIZE = 1024


def _env_timeout() -> float | None:
    value = os.environ.get("L2TPCTL_TIMEOUT", "").strip()
    if not value:
        return None
    try:
        timeout = float(value)
    except ValueError:
        return None
    return timeout if timeout > 0 else None


def _env_log_level() -> LogLevel:
    value = os.environ.get("L2TPCTL_LOG_LEVEL", "").strip().lower()
    try:
        return LogLevel(value)
    except ValueError:
        return LogLevel.WARNING


# =============================================================================
# Configuration Dataclass
# =============================================================================


@dataclass
class ControlConfig:
    """
    Control client configuration.

    Attributes:
        CONTROL_FILE: Path of the daemon's control socket.
        TIMEOUT: Socket timeout in seconds, None blocks indefinitely.
        RECV_CHUNK_SIZE: Size of each read while draining the response.
        LOG_LEVEL: Logging verbosity level.
    """

    CONTROL_FILE: str = field(
        default_factory=lambda: os.environ.get(
            "L2TPCTL_CONTROL_FILE", DEFAULT_CONTROL_FILE
        )
    )
    TIMEOUT: float | None = field(default_factory=_env_timeout)
    RECV_CHUNK_SIZE: int = DEFAULT_RECV_CHUNK_SIZE
    LOG_LEVEL: LogLevel = field(default_factory=_env_log_level)

    def source_of(self, name: str) -> str:
        """Report where a setting's value came from (env or default)."""
        env_names = {
            "CONTROL_FILE": "L2TPCTL_CONTROL_FILE",
            "TIMEOUT": "L2TPCTL_TIMEOUT",
            "LOG_LEVEL": "L2TPCTL_LOG_LEVEL",
        }
        env_name = env_names.get(name)
        if env_name and os.environ.get(env_name):
            return "env"
        return "default"


# Global configuration instance
config = ControlConfig()
