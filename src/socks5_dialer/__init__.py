"""SOCKS5 client for opening CONNECT tunnels through a proxy."""

import pathlib
import sys

from loguru import logger

from socks5_dialer.core.dialer import DEFAULT_TIMEOUT, DeadlineConnection, connect
from socks5_dialer.core.endpoint import Endpoint, join_host_port, resolve
from socks5_dialer.core.exceptions import (
    AddressTooLong,
    AuthNegotiationFailed,
    ConnectRefused,
    InvalidAddress,
    InvalidPort,
    ProtocolMismatch,
    ProxyError,
    TransportError,
    TransportTimeout,
    UnsupportedAddressType,
)

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Silent unless the application opts in with logger.enable("socks5_dialer")
logger.disable("socks5_dialer")


def get_version() -> str:
    """Read version from pyproject.toml."""
    # Start from the current file's directory
    current_dir = pathlib.Path(__file__).parent
    # Look for pyproject.toml in parent directories
    for parent in [current_dir, *current_dir.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            with pyproject_path.open("rb") as f:
                pyproject_data = tomllib.load(f)
            return pyproject_data["project"]["version"]

    # Fallback version if file not found
    return "0.0.0"


__version__ = get_version()

__all__ = [
    "AddressTooLong",
    "AuthNegotiationFailed",
    "ConnectRefused",
    "connect",
    "DeadlineConnection",
    "DEFAULT_TIMEOUT",
    "Endpoint",
    "InvalidAddress",
    "InvalidPort",
    "join_host_port",
    "ProtocolMismatch",
    "ProxyError",
    "resolve",
    "TransportError",
    "TransportTimeout",
    "UnsupportedAddressType",
    "__version__",
]
