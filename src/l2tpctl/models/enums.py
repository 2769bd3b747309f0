"""
Enumeration types for l2tpctl.

This module defines the request tags understood by the daemon's control
socket and the configuration options shared by the CLI and the core.
"""

from enum import Enum


# =============================================================================
# Request-Related Enums
# =============================================================================


class RequestKind(str, Enum):
    """
    Single-character request tags of the daemon control protocol.

    The values are owned by the daemon (CONTROL_PIPE_REQ_* constants) and
    must not be changed.
    """

    LAC_ADD_MODIFY = "a"
    LAC_CONNECT = "c"
    LAC_DISCONNECT = "d"
    LAC_REMOVE = "r"
    LAC_STATUS = "s"
    LNS_ADD_MODIFY = "z"
    LNS_STATUS = "y"
    LNS_REMOVE = "x"
    AVAILABLE = "v"

    @property
    def carries_options(self) -> bool:
        """Whether the request is followed by an encoded option list."""
        return self in (RequestKind.LAC_ADD_MODIFY, RequestKind.LNS_ADD_MODIFY)


# =============================================================================
# Configuration Enums
# =============================================================================


class LogLevel(str, Enum):
    """
    Logging verbosity levels for l2tpctl.

    Levels (from most to least verbose):
        - FULL: Complete trace with detailed stack information
        - DEBUG: Debug messages and above
        - INFO: Informational messages and above
        - WARNING: Only warnings and errors
    """

    FULL = "full"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
