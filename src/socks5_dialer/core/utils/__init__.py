"""Utility functions and helpers."""

from socks5_dialer.core.utils.prompt import DialReport, render_dial_report
from socks5_dialer.core.utils.utils import format_bytes, preview_bytes

__all__ = ["DialReport", "format_bytes", "preview_bytes", "render_dial_report"]
