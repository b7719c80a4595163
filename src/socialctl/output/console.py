"""Themed Rich console that renders into a string.

The formatters keep a ``ServiceResult -> str`` contract; Click does the
actual writing. Colour is emitted only when stdout is a terminal.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "social.ok": "bold green",
        "social.error": "bold red",
        "social.op": "bold cyan",
        "social.key": "dim",
        "social.id": "bold blue",
        "social.name": "bold",
        "social.degree": "magenta",
    }
)


def render_text(
    draw: Callable[[Console], None], *, no_color: bool = False, width: int = 120
) -> str:
    """Run *draw* against a fresh console and return what it printed."""
    console = Console(theme=THEME, no_color=no_color, highlight=False, width=width)
    with console.capture() as capture:
        draw(console)
    return capture.get()
