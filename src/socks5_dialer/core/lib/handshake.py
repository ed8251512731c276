"""SOCKS5 CONNECT handshake driver.

This module performs the client side of the SOCKS5 negotiation according to
RFC 1928, providing:
- Proxy connection with a total time budget
- Method negotiation (no-auth only)
- CONNECT request with a domain name destination
- Reply validation and bound address consumption

The timeout covers the whole exchange: the deadline is anchored at the moment
``connect`` is called, so a slow TCP connect leaves less time for the
handshake rather than extending it.

Example:
    conn = connect("127.0.0.1:1080", "example.com:443", timeout=5)
    conn.set_deadline(None)
    conn.write(b"GET / HTTP/1.0\\r\\n\\r\\n")
"""

import time
from typing import Final

from loguru import logger

from socks5_dialer.core.endpoint import resolve
from socks5_dialer.core.exceptions import ProxyError

from .protocol import (
    METHOD_REPLY_SIZE,
    REPLY_HEADER_SIZE,
    bound_address_length,
    check_method_reply,
    check_reply_header,
    encode_connect_request,
    encode_greeting,
)
from .transport import DeadlineConnection

DEFAULT_TIMEOUT: Final = 10.0  # seconds


class Socks5Handshake:
    """Negotiate a CONNECT tunnel over an open connection to the proxy."""

    def __init__(self, conn: DeadlineConnection) -> None:
        self.conn = conn

    def _negotiate(self) -> None:
        """Offer no-auth and check the proxy accepted it."""
        self.conn.write(encode_greeting())
        check_method_reply(self.conn.read_exact(METHOD_REPLY_SIZE))
        logger.debug(f"{self.conn.address}: no-auth method accepted")

    def _request_connect(self, target_address: str) -> None:
        """Send the CONNECT request for ``target_address``."""
        host, port = resolve(target_address)
        self.conn.write(encode_connect_request(host, port))
        logger.debug(f"{self.conn.address}: CONNECT {target_address} sent")

    def _read_reply(self) -> None:
        """Validate the CONNECT reply and drain the bound address."""
        addr_type = check_reply_header(self.conn.read_exact(REPLY_HEADER_SIZE))
        # Bound address and port are not used
        self.conn.read_exact(bound_address_length(addr_type))

    def run(self, target_address: str) -> None:
        self._negotiate()
        self._request_connect(target_address)
        self._read_reply()


def connect(proxy_address: str, target_address: str, timeout: float) -> DeadlineConnection:
    """Open a tunnel to ``target_address`` through the SOCKS5 proxy at ``proxy_address``.

    Args:
        proxy_address: Proxy in ``host:port`` form
        target_address: Destination in ``host:port`` form, sent to the proxy by name
        timeout: Seconds allowed for the whole operation, connect included

    Returns:
        DeadlineConnection: The negotiated stream. Its deadline is still set to
        the start of the call plus ``timeout``; clear or extend it with
        ``set_deadline`` before further use.

    Raises:
        ValueError: If ``timeout`` is not a positive number
        ProxyError: If any step fails; see ``socks5_dialer.core.exceptions``
    """
    if timeout <= 0:
        msg = f"timeout must be positive, got {timeout}"
        raise ValueError(msg)

    start = time.monotonic()
    deadline = start + timeout
    proxy_host, proxy_port = resolve(proxy_address)
    conn = DeadlineConnection.open(proxy_host, proxy_port, deadline)
    conn.set_deadline(deadline)

    try:
        Socks5Handshake(conn).run(target_address)
    except ProxyError as exc:
        logger.debug(f"SOCKS5 handshake with {proxy_address} failed: {exc}")
        conn.close()
        raise

    elapsed = time.monotonic() - start
    logger.info(f"Tunnel to {target_address} via {proxy_address} established in {elapsed:.3f}s")
    return conn
