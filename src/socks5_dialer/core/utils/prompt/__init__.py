"""Prompt and UI utilities."""

from socks5_dialer.core.utils.prompt.dial_ui import DialReport, render_dial_report

__all__ = ["DialReport", "render_dial_report"]
