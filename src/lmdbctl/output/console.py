"""Rich Console factory and theme for lmdbctl output.

Creates Console instances that render to a StringIO buffer so rendered
text can be written to the byte-oriented output sink.  Colour codes are
only produced when ``color=True`` (the sink is a terminal).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LMDB_THEME = Theme(
    {
        "lmdb.error": "bold red",
        "lmdb.code": "dim",
        "lmdb.key": "bold cyan",
        "lmdb.number": "magenta",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles (only when the sink is a terminal).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LMDB_THEME,
        force_terminal=color,
        no_color=not color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
