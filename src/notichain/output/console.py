"""Rich Console factory and theme for notichain output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract.  Outside a terminal (tests, pipes) Rich drops color.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NOTICHAIN_THEME = Theme(
    {
        "nc.ok": "bold green",
        "nc.error": "bold red",
        "nc.op": "bold cyan",
        "nc.key": "dim",
        "nc.link": "bold blue",
        "nc.terminal": "bold magenta",
        "nc.message": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=NOTICHAIN_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
