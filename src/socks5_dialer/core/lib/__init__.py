"""Core dialer library components."""

from .handshake import DEFAULT_TIMEOUT, Socks5Handshake, connect
from .transport import DeadlineConnection

__all__ = [
    "connect",
    "DeadlineConnection",
    "DEFAULT_TIMEOUT",
    "Socks5Handshake",
]
