"""Console and logging utilities for the devports CLI."""

import logging
import os
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

# Shared console instances
console = Console()
error_console = Console(stderr=True)

# Debug mode - enabled by DEVPORTS_DEBUG environment variable
DEBUG = os.getenv("DEVPORTS_DEBUG", "").lower() in ("1", "true", "yes")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-22s | %(message)s"


def setup_logging(debug: bool = DEBUG, log_path: Path | None = None) -> logging.Logger:
    """Configure the ``devports`` logger.

    Warnings (everything with debug on) go to stderr through rich. If a log
    path is given, the full DEBUG stream is also written there.

    Args:
        debug: Show debug records on stderr
        log_path: Optional log file

    Returns:
        The package logger
    """
    logger = logging.getLogger("devports")
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    rich_handler = RichHandler(console=error_console, show_path=False, rich_tracebacks=True)
    rich_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.addHandler(rich_handler)

    if log_path is not None:
        try:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            logger.warning("Not logging to %s: %s", log_path, e)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

    return logger


def debug(message: str, **kwargs: Any) -> None:
    """Print debug message if DEBUG mode is enabled.

    Args:
        message: Message to print
        **kwargs: Additional arguments for console.print
    """
    if DEBUG:
        error_console.print(f"[dim][DEBUG][/dim] {message}", **kwargs)


def success(message: str, **kwargs: Any) -> None:
    """Print success message in green."""
    console.print(f"[green]{message}[/green]", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    """Print warning message in yellow."""
    console.print(f"[yellow]{message}[/yellow]", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print error message in red to stderr.

    Args:
        message: Message to print
        **kwargs: Additional arguments for console.print
    """
    error_console.print(f"[red]Error:[/red] {message}", **kwargs)
