"""Logging setup for the command-line entry point."""

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Route log records through rich.

    Args:
        level: Root log level name (e.g. "DEBUG", "INFO")
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
