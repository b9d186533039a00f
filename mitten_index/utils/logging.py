"""Logging configuration."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import LOG_LEVEL


def configure_logging(level: str | None = None, console: Console | None = None) -> None:
    """Route the root logger through rich, writing to stderr by default."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), show_path=False)],
        force=True,
    )
