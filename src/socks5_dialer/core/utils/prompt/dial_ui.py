"""Dial-specific UI components."""

from dataclasses import dataclass

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from socks5_dialer.core.utils.utils import format_bytes, preview_bytes


@dataclass
class DialReport:
    """Outcome of one diagnostic dial.

    Attributes:
        proxy: Proxy address as given on the command line
        target: Destination address as given on the command line
        local_address: Local end of the tunnel socket
        peer_address: Proxy end of the tunnel socket
        elapsed: Seconds spent connecting and negotiating
        sent: Bytes written after the handshake
        response: Bytes read back after the handshake, if any exchange happened
    """

    proxy: str
    target: str
    local_address: str
    peer_address: str
    elapsed: float
    sent: int = 0
    response: bytes | None = None


def _generate_table(report: DialReport) -> Table:
    """Generate the result table."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("Proxy", report.proxy)
    table.add_row("Target", report.target)
    table.add_row("Local Address", report.local_address)
    table.add_row("Proxy Address", report.peer_address)
    table.add_row("Handshake Time", f"{report.elapsed * 1000:.1f} ms")

    if report.response is not None:
        table.add_row("Sent", format_bytes(report.sent))
        table.add_row("Received", format_bytes(len(report.response)))
        table.add_row("Response", Text(preview_bytes(report.response) or "(empty)"))
    return table


def render_dial_report(report: DialReport) -> Panel:
    """Generate the panel shown after a successful dial."""
    title = Text(f"SOCKS5 Tunnel: {report.target}", style="bold cyan")
    return Panel(
        _generate_table(report),
        title=title,
        border_style="blue",
        padding=(1, 2),
    )
