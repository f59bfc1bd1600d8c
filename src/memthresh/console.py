"""Stderr console and log handler shared by all memthresh modules."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# stdout belongs to the executed command
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

_handler: RichHandler | None = None


def configure_logging(level: int) -> None:
    """Route the memthresh logger through the stderr console."""
    global _handler

    logger = logging.getLogger("memthresh")
    if _handler is None:
        _handler = RichHandler(
            console=err_console,
            show_path=False,
            markup=False,
            rich_tracebacks=False,
        )
        logger.addHandler(_handler)
        logger.propagate = False
    logger.setLevel(level)
    _handler.setLevel(level)


def fatal(message: str) -> None:
    """Print a fatal diagnostic."""
    err_console.print(f"FATAL: {message}", markup=False)
