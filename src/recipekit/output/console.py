"""Rich Console factory and theme for recipekit output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

RECIPEKIT_THEME = Theme(
    {
        "rk.ok": "bold green",
        "rk.error": "bold red",
        "rk.warning": "bold yellow",
        "rk.op": "bold cyan",
        "rk.key": "dim",
        "rk.method": "bold magenta",
        "rk.path": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console backed by a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=RECIPEKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
