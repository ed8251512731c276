"""Core SOCKS5 client implementation.

This package contains the core components of the dialer:
- Handshake driver (SOCKS5 CONNECT)
- Deadline-bounded transport
- Endpoint parsing
- Exception hierarchy
- Logging configuration

The core package provides all the functionality needed to open a tunnel,
while keeping the implementation details separate from the command-line
interface.
"""
