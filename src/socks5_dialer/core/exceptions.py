"""Custom exceptions for the SOCKS5 dialer.

This module defines the exceptions raised while establishing a tunnel through a
SOCKS5 proxy. Every failure aborts the handshake and is classified as one of:
- Transport failures (connect, read, write, deadline expiry)
- Protocol violations by the proxy (wrong version, nonzero reserved byte)
- Authentication negotiation failures
- Malformed caller-supplied addresses
- Refused CONNECT requests
- Unsupported bound address types

Each exception keeps the offending value as an attribute so callers can react
without parsing the message.

Example:
    try:
        conn = connect("127.0.0.1:1080", "example.com:443", timeout=5)
    except ConnectRefused as e:
        console.print(f"[red]Proxy refused the tunnel (status {e.status:#04x})")
    except ProxyError as e:
        console.print(f"[red]Handshake failed: {e}")
"""


class ProxyError(Exception):
    """Base exception for SOCKS5 dialer errors."""


class TransportError(ProxyError):
    """Raised when the underlying stream fails to connect, read or write."""

    def __init__(self, operation: str, address: str, reason: str) -> None:
        self.operation = operation
        self.address = address
        self.reason = reason
        super().__init__(f"{operation} {address}: {reason}")


class TransportTimeout(TransportError):
    """Raised when the connection deadline expires during an operation."""


class ProtocolMismatch(ProxyError):
    """Raised when a fixed-position byte in a proxy reply has the wrong value."""

    def __init__(self, field: str, value: int, message: str) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class AuthNegotiationFailed(ProxyError):
    """Raised when the proxy selects an authentication method other than none."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"SOCKS authentication method negotiation failed; "
            f"expected {expected:#04x}, got {actual:#04x}"
        )


class InvalidAddress(ProxyError, ValueError):
    """Raised when an address is not in host:port form."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"address {address!r}: {reason}")


class InvalidPort(ProxyError, ValueError):
    """Raised when a port is not a decimal integer in [0, 65535]."""

    def __init__(self, port: str) -> None:
        self.port = port
        super().__init__(f"invalid port {port!r}")


class AddressTooLong(ProxyError):
    """Raised when the encoded destination host exceeds the length prefix."""

    def __init__(self, host: str, limit: int) -> None:
        self.host = host
        self.limit = limit
        super().__init__(f"hostname {host} over maximum length {limit}")


class ConnectRefused(ProxyError):
    """Raised when the proxy answers the CONNECT request with a failure status."""

    def __init__(self, status: int, description: str) -> None:
        self.status = status
        self.description = description
        super().__init__(
            f"could not complete SOCKS5 connection: {status:#04x} ({description})"
        )


class UnsupportedAddressType(ProxyError):
    """Raised when the CONNECT reply carries a bound address type we cannot read."""

    def __init__(self, address_type: int) -> None:
        self.address_type = address_type
        super().__init__(f"invalid address type {address_type:#04x} in CONNECT response")
