"""Rich renderers for console output that is not a raw store value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from lmdbctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from lmdbctl.services.result import ServiceResult


def render_stat(stat: dict[str, Any], *, color: bool = False) -> str:
    """Render environment statistics as an aligned two-column listing."""
    console = create_console(color=color)
    table = Table(show_header=False, box=None, pad_edge=False, expand=False)
    table.add_column("Field", style="lmdb.key", no_wrap=True)
    table.add_column("Value", style="lmdb.number", justify="right")
    for key, value in stat.items():
        table.add_row(key, str(value))
    console.print(table)
    return "\n".join(line.rstrip() for line in get_output(console).splitlines())


def render_error(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a failed result as a single line.

    Plain mode is just the error message.  Verbose mode appends the
    operation and error code.
    """
    err = result.error
    msg = err.message if err else "Unknown error"
    if not verbose:
        return msg

    console = create_console(color=color)
    line = Text(msg, style="lmdb.error")
    if err is not None:
        line.append(f"  [{result.op}: {err.code}]", style="lmdb.code")
    console.print(line)
    return get_output(console).rstrip("\n")
