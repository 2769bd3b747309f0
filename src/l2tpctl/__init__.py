"""
l2tpctl - control client for the xl2tpd tunneling daemon.

Talks to a running daemon over its local control socket: encodes
add/connect/disconnect/remove/status requests and relays the daemon's
response to stdout.
"""

__version__ = "0.1.0"
