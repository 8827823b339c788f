"""Rich Console factory and theme for linkto output.

Consoles render into a StringIO buffer so renderers stay
``ServiceResult -> str``. Without a terminal (tests, pipes) Rich drops
the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LINKTO_THEME = Theme(
    {
        "lk.ok": "bold green",
        "lk.error": "bold red",
        "lk.op": "bold cyan",
        "lk.key": "dim",
        "lk.url": "underline blue",
        "lk.html": "green",
        "lk.yes": "bold green",
        "lk.no": "bold yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=LINKTO_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
