"""Command line interface modules.

This package provides the diagnostic command-line tool for:
- Opening a tunnel through a SOCKS5 proxy
- Optionally exchanging a payload with the destination
- Displaying handshake timing and addresses
- Error reporting and logging
"""
