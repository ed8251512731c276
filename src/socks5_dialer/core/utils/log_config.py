"""Logging configuration for the dialer.

This module provides centralized logging configuration using Loguru.
It sets up logging to the console and, optionally, to a rotating file.
The library itself stays silent until ``configure_logging`` (or
``logger.enable("socks5_dialer")``) turns its messages on.
"""

import sys
from pathlib import Path

from loguru import logger

# Log directory in user's home directory
LOG_DIR = Path.home() / ".socks5-dialer" / "logs"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(*, debug: bool = False, log_to_file: bool = False) -> None:
    """Install the console sink and, if requested, the rotating file sink.

    Args:
        debug: Log handshake steps at DEBUG level on the console
        log_to_file: Also write DEBUG logs to ``LOG_DIR / "dialer.log"``
    """
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if debug else "INFO",
        backtrace=True,
        diagnose=debug,
    )

    if log_to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "dialer.log",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format=FILE_FORMAT,
            level="DEBUG",
            backtrace=True,
            diagnose=True,
        )

    logger.enable("socks5_dialer")


__all__ = ["configure_logging", "logger", "LOG_DIR"]
