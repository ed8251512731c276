"""Main entry point for dialing through a SOCKS5 proxy.

This module provides a clean interface to the underlying handshake
implementation by exposing only the necessary components through its public API.

The module abstracts away the complexity of:
- Connecting to the proxy within a total time budget
- Method negotiation
- CONNECT request and reply handling

Example:
    from socks5_dialer.core.dialer import connect

    # Reach example.com:443 through a local proxy, allowing 5 seconds
    conn = connect("127.0.0.1:1080", "example.com:443", 5)

Attributes:
    __all__ (list): List of public components exposed by this module
"""

from .lib import DEFAULT_TIMEOUT, DeadlineConnection, connect

__all__ = ["connect", "DeadlineConnection", "DEFAULT_TIMEOUT"]
