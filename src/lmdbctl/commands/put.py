"""Commands: put, del — single-key mutations in a write transaction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lmdbctl.commands._base import BaseHandler
from lmdbctl.shell.context import OK
from lmdbctl.shell.errors import NotFound

if TYPE_CHECKING:
    from lmdbctl.shell.context import SessionContext
    from lmdbctl.shell.resolver import Command


class PutHandler(BaseHandler):
    """Insert or overwrite a key."""

    verbs = ("put",)

    def execute(self, context: SessionContext, command: Command) -> None:
        with context.within_write() as txn:
            txn.put(command.key, command.value)
        context.output(OK)


class DelHandler(BaseHandler):
    """Delete a key.  A missing key aborts the transaction with NotFound."""

    verbs = ("del",)

    def execute(self, context: SessionContext, command: Command) -> None:
        with context.within_write() as txn:
            if not txn.delete(command.key):
                raise NotFound
        context.output(OK)
