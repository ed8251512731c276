"""SOCKS5 wire format for the client side of the CONNECT handshake.

This module implements the subset of RFC 1928 a client needs to open a tunnel:
- Greeting offering only the "no authentication" method
- Method selection reply validation
- CONNECT request encoding with a domain name destination
- CONNECT reply header validation
- Bound address sizing for IPv4 and IPv6 replies

Every message has either a constant length or a length prefix, so the
functions here operate on complete byte strings and never touch a socket.

Example:
    request = encode_connect_request("example.com", 443)
    # b"\\x05\\x01\\x00\\x03\\x0bexample.com\\x01\\xbb"
"""

import struct
from typing import Final

from socks5_dialer.core.exceptions import (
    AddressTooLong,
    AuthNegotiationFailed,
    ConnectRefused,
    InvalidAddress,
    ProtocolMismatch,
    UnsupportedAddressType,
)

# SOCKS protocol constants
SOCKS_VERSION: Final = 5
CONNECT_CMD: Final = 1
RESERVED: Final = 0
NO_AUTH: Final = 0
ADDR_TYPE_IPV4: Final = 1
ADDR_TYPE_DOMAIN: Final = 3
ADDR_TYPE_IPV6: Final = 4

# Response codes
RESP_SUCCESS: Final = 0
REPLY_MESSAGES: Final = {
    0x01: "General SOCKS server failure",
    0x02: "Connection not allowed by ruleset",
    0x03: "Network unreachable",
    0x04: "Host unreachable",
    0x05: "Connection refused",
    0x06: "TTL expired",
    0x07: "Command not supported",
    0x08: "Address type not supported",
}

# Message sizes
METHOD_REPLY_SIZE: Final = 2
REPLY_HEADER_SIZE: Final = 4
PORT_SIZE: Final = 2
MAX_HOST_LENGTH: Final = 0xFF

# Bound address length per address type, port excluded
BOUND_ADDRESS_SIZES: Final = {
    ADDR_TYPE_IPV4: 4,
    ADDR_TYPE_IPV6: 16,
}


def encode_greeting() -> bytes:
    """Build the greeting offering a single method: no authentication."""
    return struct.pack("!BBB", SOCKS_VERSION, 1, NO_AUTH)


def check_method_reply(data: bytes) -> None:
    """Validate the proxy's method selection reply.

    Args:
        data: The two reply bytes (VER, METHOD)

    Raises:
        ProtocolMismatch: If VER is not 5
        AuthNegotiationFailed: If the proxy chose a method other than no-auth
    """
    version, method = struct.unpack("!BB", data)
    if version != SOCKS_VERSION:
        raise ProtocolMismatch(
            "version", version, "SOCKS proxy server does not support SOCKS5"
        )
    if method != NO_AUTH:
        raise AuthNegotiationFailed(NO_AUTH, method)


def encode_connect_request(host: str, port: int) -> bytes:
    """Build a CONNECT request addressing ``host`` by domain name.

    Args:
        host: Destination hostname or IP literal, sent as-is
        port: Destination port

    Returns:
        bytes: ``VER CMD RSV ATYP LEN HOST PORT``

    Raises:
        InvalidAddress: If the host cannot be encoded as UTF-8
        AddressTooLong: If the UTF-8 encoded host exceeds 255 bytes
    """
    try:
        host_bytes = host.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidAddress(host, "not encodable as UTF-8") from exc
    if len(host_bytes) > MAX_HOST_LENGTH:
        raise AddressTooLong(host, MAX_HOST_LENGTH)

    header = struct.pack(
        "!BBBBB", SOCKS_VERSION, CONNECT_CMD, RESERVED, ADDR_TYPE_DOMAIN, len(host_bytes)
    )
    return header + host_bytes + struct.pack("!H", port)


def describe_reply(status: int) -> str:
    """Return the RFC 1928 description of a CONNECT reply status."""
    if status == RESP_SUCCESS:
        return "Succeeded"
    return REPLY_MESSAGES.get(status, "Unknown error")


def check_reply_header(data: bytes) -> int:
    """Validate the first four bytes of the CONNECT reply.

    Args:
        data: ``VER REP RSV ATYP``

    Returns:
        int: The bound address type (ATYP)

    Raises:
        ProtocolMismatch: If VER is not 5 or RSV is not zero
        ConnectRefused: If REP signals anything but success
    """
    version, status, reserved, addr_type = struct.unpack("!BBBB", data)
    if version != SOCKS_VERSION:
        raise ProtocolMismatch("version", version, f"SOCKS version {version:#04x} is not 5")
    if status != RESP_SUCCESS:
        raise ConnectRefused(status, describe_reply(status))
    if reserved != RESERVED:
        raise ProtocolMismatch(
            "reserved", reserved, f"SOCKS5: reserved byte {reserved:#04x} is not 0x00"
        )
    return addr_type


def bound_address_length(addr_type: int) -> int:
    """Number of bytes following the reply header for ``addr_type``.

    Covers the bound address plus its two-byte port.

    Raises:
        UnsupportedAddressType: If the type is neither IPv4 nor IPv6
    """
    size = BOUND_ADDRESS_SIZES.get(addr_type)
    if size is None:
        raise UnsupportedAddressType(addr_type)
    return size + PORT_SIZE
