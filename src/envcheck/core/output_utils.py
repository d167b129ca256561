"""
Console narration for envcheck.

Every status line goes through ``log`` so that colors, and the ability to turn
them off, live in one place.
"""
from typing import IO, Optional

from rich.console import Console
from rich.text import Text

# Colors used by the report, mapped to rich styles
COLOR_STYLES = {
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
}

_console = Console(highlight=False, soft_wrap=True)


def configure_console(no_color: bool = False, file: Optional[IO[str]] = None) -> Console:
    """Replace the module console, e.g. to disable ANSI codes or redirect output."""
    global _console
    _console = Console(
        file=file,
        highlight=False,
        soft_wrap=True,
        color_system=None if no_color else "auto",
    )
    return _console


def log(color: str, message: str) -> None:
    """Print one line of ``message`` in ``color``."""
    # Text, not markup: values read from .env may contain square brackets
    _console.print(Text(message, style=COLOR_STYLES.get(color, "")))


def blank_line() -> None:
    _console.print()
