"""Endpoint parsing for proxy and destination addresses.

This module turns textual ``host:port`` addresses into validated endpoints:
- Splitting on the last colon
- Bracketed IPv6 literals (``[::1]:1080``)
- Decimal port validation in the unsigned 16-bit range

Example:
    host, port = resolve("[2001:db8::1]:443")
    print(join_host_port(host, port))  # [2001:db8::1]:443
"""

from typing import Final, NamedTuple

from socks5_dialer.core.exceptions import InvalidAddress, InvalidPort

MAX_PORT: Final = 0xFFFF


class Endpoint(NamedTuple):
    """A host and port pair.

    Attributes:
        host: Hostname or IP literal, without brackets
        port: TCP port in [0, 65535]
    """

    host: str
    port: int


def _split_host_port(address: str) -> tuple[str, str]:
    if address.startswith("["):
        end = address.find("]")
        if end == -1:
            raise InvalidAddress(address, "missing ']'")
        if end + 1 == len(address):
            raise InvalidAddress(address, "missing port")
        if address[end + 1] != ":":
            raise InvalidAddress(address, "unexpected text after ']'")
        host, port = address[1:end], address[end + 2 :]
        if "[" in host:
            raise InvalidAddress(address, "unexpected '['")
    else:
        colon = address.rfind(":")
        if colon == -1:
            raise InvalidAddress(address, "missing port")
        host, port = address[:colon], address[colon + 1 :]
        if ":" in host:
            raise InvalidAddress(address, "too many colons")
        if "[" in host or "]" in host:
            raise InvalidAddress(address, "unexpected bracket")

    if "[" in port or "]" in port:
        raise InvalidAddress(address, "unexpected bracket in port")
    if not host:
        raise InvalidAddress(address, "empty host")
    return host, port


def parse_port(text: str) -> int:
    """Parse a decimal port number.

    Args:
        text: Port as written in the address

    Returns:
        int: Port in [0, 65535]

    Raises:
        InvalidPort: If the text is not plain ASCII digits or is out of range
    """
    # str.isdigit alone accepts non-ASCII digits such as "²"
    if not text.isascii() or not text.isdigit():
        raise InvalidPort(text)
    port = int(text)
    if port > MAX_PORT:
        raise InvalidPort(text)
    return port


def resolve(address: str) -> Endpoint:
    """Split ``address`` into a host and a validated port.

    Args:
        address: Address in ``host:port`` or ``[ipv6]:port`` form

    Returns:
        Endpoint: Host without brackets and integer port

    Raises:
        InvalidAddress: If the separator is missing or the host is empty
        InvalidPort: If the port is not a decimal integer in [0, 65535]
    """
    host, port = _split_host_port(address)
    return Endpoint(host, parse_port(port))


def join_host_port(host: str, port: int) -> str:
    """Combine host and port into an address, bracketing IPv6 literals."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"
