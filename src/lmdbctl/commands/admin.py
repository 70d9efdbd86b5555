"""Commands: stat, expand, exit/quit — session and environment management."""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING

from lmdbctl.commands._base import BaseHandler
from lmdbctl.output.renderers import render_stat
from lmdbctl.shell.context import OK
from lmdbctl.shell.errors import InvalidArgument

if TYPE_CHECKING:
    from lmdbctl.shell.context import SessionContext
    from lmdbctl.shell.resolver import Command

DEFAULT_EXPAND_FACTOR = 2.0


class StatHandler(BaseHandler):
    """Print environment statistics."""

    verbs = ("stat",)

    def execute(self, context: SessionContext, command: Command) -> None:
        context.output_text(render_stat(context.store.stat(), color=context.color))


class ExpandHandler(BaseHandler):
    """Grow the map size by an optional factor (default: the configured one)."""

    verbs = ("expand",)

    def __init__(self, factor: float = DEFAULT_EXPAND_FACTOR) -> None:
        self.factor = factor

    def execute(self, context: SessionContext, command: Command) -> None:
        factor = self.factor
        if command.key is not None:
            try:
                factor = float(command.key)
            except ValueError:
                raise InvalidArgument(f"invalid expand factor: {command.key!r}") from None
        if not math.isfinite(factor) or factor <= 1:
            raise InvalidArgument(f"expand factor must be greater than 1, got {factor:g}")
        if context.store.map_size * factor > sys.maxsize:
            raise InvalidArgument(f"expand factor {factor:g} exceeds the largest map size")
        context.store.expand(factor)
        context.output(OK)


class ExitHandler(BaseHandler):
    """Stop the REPL loop.  The store is closed by the caller at shutdown."""

    verbs = ("exit", "quit")

    def execute(self, context: SessionContext, command: Command) -> None:
        context.request_exit()
