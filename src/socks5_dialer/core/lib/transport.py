"""Blocking TCP transport with an absolute deadline.

Python sockets only know relative, per-call timeouts. This module wraps a
socket so that a single deadline bounds every subsequent read and write:
- Connect bounded by the same deadline across every resolved address
- Absolute deadline on the monotonic clock
- Exact-length reads across fragmented segments
- Full writes
- Socket errors translated into TransportError / TransportTimeout

Example:
    deadline = time.monotonic() + 5
    conn = DeadlineConnection.open("127.0.0.1", 1080, deadline)
    conn.set_deadline(deadline)
    conn.write(b"\\x05\\x01\\x00")
    reply = conn.read_exact(2)
"""

import socket
import time

from socks5_dialer.core.endpoint import join_host_port
from socks5_dialer.core.exceptions import TransportError, TransportTimeout


class DeadlineConnection:
    """A connected stream socket whose I/O is bounded by one deadline."""

    def __init__(self, sock: socket.socket, address: str) -> None:
        """Wrap an already connected socket.

        Args:
            sock: Connected stream socket
            address: Remote address, used in error messages
        """
        self.sock = sock
        self.address = address
        self.deadline: float | None = None

    @classmethod
    def open(cls, host: str, port: int, deadline: float) -> "DeadlineConnection":
        """Connect to ``host:port`` before ``deadline`` (``time.monotonic`` value).

        Every address the name resolves to is tried in turn, each attempt
        getting only what is left of the budget.

        Raises:
            TransportTimeout: If the connection is not established in time
            TransportError: On any other connect failure
        """
        address = join_host_port(host, port)
        try:
            addrinfo = socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)
        except OSError as exc:
            raise TransportError("connect", address, str(exc)) from exc

        last_error: OSError | None = None
        expired = False
        for family, type_, proto, _, sockaddr in addrinfo:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                expired = True
                break
            sock = socket.socket(family, type_, proto)
            try:
                sock.settimeout(remaining)
                sock.connect(sockaddr)
            except OSError as exc:
                sock.close()
                last_error = exc
                continue
            return cls(sock, address)

        if expired or isinstance(last_error, TimeoutError):
            raise TransportTimeout("connect", address, "i/o timeout") from last_error
        raise TransportError("connect", address, str(last_error)) from last_error

    def set_deadline(self, deadline: float | None) -> None:
        """Bound all further I/O by ``deadline`` (``time.monotonic`` value).

        ``None`` removes the deadline and makes the socket fully blocking.
        """
        self.deadline = deadline
        if deadline is None:
            self.sock.settimeout(None)

    def _arm(self, operation: str) -> None:
        if self.deadline is None:
            return
        remaining = self.deadline - time.monotonic()
        if remaining <= 0:
            raise TransportTimeout(operation, self.address, "i/o timeout")
        self.sock.settimeout(remaining)

    def read(self, size: int) -> bytes:
        """Receive at most ``size`` bytes; an empty result means EOF."""
        self._arm("read")
        try:
            return self.sock.recv(size)
        except TimeoutError as exc:
            raise TransportTimeout("read", self.address, "i/o timeout") from exc
        except OSError as exc:
            raise TransportError("read", self.address, str(exc)) from exc

    def read_exact(self, size: int) -> bytes:
        """Receive exactly ``size`` bytes.

        Raises:
            TransportTimeout: If the deadline passes before all bytes arrive
            TransportError: If the peer closes early or the socket fails
        """
        buf = bytearray()
        while len(buf) < size:
            chunk = self.read(size - len(buf))
            if not chunk:
                raise TransportError(
                    "read", self.address, f"unexpected EOF after {len(buf)} of {size} bytes"
                )
            buf += chunk
        return bytes(buf)

    def write(self, data: bytes) -> None:
        """Send all of ``data``."""
        self._arm("write")
        try:
            self.sock.sendall(data)
        except TimeoutError as exc:
            raise TransportTimeout("write", self.address, "i/o timeout") from exc
        except OSError as exc:
            raise TransportError("write", self.address, str(exc)) from exc

    @property
    def local_address(self) -> str:
        """Local end of the connection as ``host:port``."""
        host, port = self.sock.getsockname()[:2]
        return join_host_port(host, port)

    @property
    def peer_address(self) -> str:
        """Remote end of the connection as ``host:port``."""
        host, port = self.sock.getpeername()[:2]
        return join_host_port(host, port)

    def close(self) -> None:
        """Close the underlying socket."""
        self.sock.close()

    def __enter__(self) -> "DeadlineConnection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
