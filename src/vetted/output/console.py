"""Rich Console factory and theme for vetted output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VETTED_THEME = Theme(
    {
        "vetted.ok": "bold green",
        "vetted.error": "bold red",
        "vetted.op": "bold cyan",
        "vetted.key": "dim",
        "vetted.value": "bold",
        "vetted.error_id": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=VETTED_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
