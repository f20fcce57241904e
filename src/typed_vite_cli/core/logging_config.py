"""Logging setup for the CLI entrypoint.

Modules log through ``logging.getLogger(__name__)``; this installs a single
rich handler on stderr so debug output does not interleave with the
progress lines printed on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "typed-vite-cli"


def _parse_level(level: str) -> int:
    numeric = logging.getLevelName(level.upper())
    if isinstance(numeric, int):
        return numeric
    return logging.WARNING


def setup_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Configure the package logger. Safe to call more than once."""
    numeric_level = _parse_level(level)
    root = logging.getLogger("typed_vite_cli")
    root.setLevel(numeric_level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(numeric_level)
            return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=numeric_level <= logging.DEBUG,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(numeric_level)
    root.addHandler(handler)


__all__ = ["setup_logging"]
