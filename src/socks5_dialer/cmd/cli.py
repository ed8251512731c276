"""Command-line interface for the SOCKS5 dialer.

This module provides a diagnostic command line on top of ``connect``, handling:
- Command-line argument parsing
- Logging setup
- Tunnel establishment through the proxy
- Optional payload exchange with the destination
- Error reporting

The CLI is built using Typer and provides a user-friendly interface for:
- Checking that a proxy accepts no-auth CONNECT requests
- Measuring handshake time
- Sending a probe payload and previewing the reply

Example:
    # Run from command line:
    $ socks5-dialer dial 127.0.0.1:1080 example.com:80 --send $'HEAD / HTTP/1.0\\r\\n\\r\\n'
"""

import time
from typing import Final

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from socks5_dialer import __version__
from socks5_dialer.core.dialer import DEFAULT_TIMEOUT, connect
from socks5_dialer.core.exceptions import ProxyError
from socks5_dialer.core.utils.log_config import configure_logging
from socks5_dialer.core.utils.prompt import DialReport, render_dial_report

BUFFER_SIZE: Final = 4096

console = Console()
app = typer.Typer(help="Open TCP tunnels through a SOCKS5 proxy")


@app.callback(invoke_without_command=True)
def version_callback():
    """Show version information."""
    console.print(f"[cyan]SOCKS5 Dialer v{__version__}[/cyan]")


@app.command(name="dial")
def dial(
    proxy: str = typer.Argument(..., help="SOCKS5 proxy address (host:port)"),
    target: str = typer.Argument(..., help="Destination address (host:port)"),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", "-t", min=0.001, help="Seconds allowed for connect and handshake"
    ),
    send: str | None = typer.Option(None, "--send", "-s", help="Text to send once the tunnel is open"),
    debug: bool = typer.Option(
        default=False,
        help="Enable debug logging",
    ),
    log_to_file: bool = typer.Option(
        default=False,
        help="Also write logs to ~/.socks5-dialer/logs",
    ),
):
    """Open a tunnel to TARGET through PROXY and report the result."""
    configure_logging(debug=debug, log_to_file=log_to_file)
    logger.debug(f"Dialing {target} via {proxy} with timeout {timeout}s")

    start = time.monotonic()
    try:
        conn = connect(proxy, target, timeout)
    except ProxyError as e:
        logger.error(f"Handshake failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}")
        raise typer.Exit(1) from e
    elapsed = time.monotonic() - start

    with conn:
        report = DialReport(
            proxy=proxy,
            target=target,
            local_address=conn.local_address,
            peer_address=conn.peer_address,
            elapsed=elapsed,
        )
        if send is not None:
            payload = send.encode("utf-8")
            # Payload exchange gets its own budget
            conn.set_deadline(time.monotonic() + timeout)
            try:
                conn.write(payload)
                report.response = conn.read(BUFFER_SIZE)
            except ProxyError as e:
                logger.error(f"Payload exchange failed: {e}")
                console.print(f"[red]Error: {escape(str(e))}")
                raise typer.Exit(1) from e
            report.sent = len(payload)

    console.print(render_dial_report(report))


if __name__ == "__main__":
    app()
