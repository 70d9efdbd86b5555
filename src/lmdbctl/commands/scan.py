"""Commands: scan, keys, it — paginated range iteration.

``scan`` and ``keys`` open a cursor (optionally bounded by a prefix) and
print the first page; ``it`` prints the next page of whatever cursor is
still open.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lmdbctl.commands._base import BaseHandler
from lmdbctl.shell.context import DEFAULT_PAGE_SIZE

if TYPE_CHECKING:
    from lmdbctl.shell.context import SessionContext
    from lmdbctl.shell.resolver import Command


class IterateHandler(BaseHandler):
    """Resume the open cursor for one more page (no-op without a cursor)."""

    verbs = ("it",)

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.page_size = page_size

    def execute(self, context: SessionContext, command: Command) -> None:
        context.iterate(self.page_size)


class ScanHandler(IterateHandler):
    """List keys and values, starting at the optional prefix."""

    verbs = ("scan",)
    include_values = True

    def execute(self, context: SessionContext, command: Command) -> None:
        context.prepare_cursor(command.key, include_values=self.include_values)
        context.iterate(self.page_size)


class KeysHandler(ScanHandler):
    """Like scan, but keys only."""

    verbs = ("keys",)
    include_values = False
