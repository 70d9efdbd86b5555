"""BaseHandler — the single capability shared by every console command.

Subclasses implement :meth:`BaseHandler.execute`, raising a
:class:`~lmdbctl.shell.errors.ShellError` (or letting an ``lmdb.Error``
escape) on failure.  :meth:`BaseHandler.run` is the boundary that turns
those into a :class:`ServiceResult`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import lmdb

from lmdbctl.services.result import ServiceResult
from lmdbctl.shell.errors import ShellError, StoreError

if TYPE_CHECKING:
    from lmdbctl.shell.context import SessionContext
    from lmdbctl.shell.resolver import Command

logger = logging.getLogger(__name__)


class BaseHandler:
    """Abstract base for command handlers.

    Usage::

        class PutHandler(BaseHandler):
            verbs = ("put",)

            def execute(self, context, command):
                with context.within_write() as txn:
                    txn.put(command.key, command.value)
                context.output(OK)
    """

    verbs: ClassVar[tuple[str, ...]] = ()

    def run(self, context: SessionContext, command: Command) -> ServiceResult:
        """Execute *command* and report the outcome.

        INVARIANT: Store errors close any open cursor.
        """
        try:
            self.execute(context, command)
        except ShellError as exc:
            return ServiceResult.failure(command.verb, exc.code, exc.message)
        except lmdb.Error as exc:
            logger.debug("Store error during %s", command.verb, exc_info=True)
            context.close_cursor()
            err = StoreError(str(exc))
            return ServiceResult.failure(
                command.verb, err.code, err.message, error_type=type(exc).__name__
            )
        return ServiceResult.success(command.verb)

    def execute(self, context: SessionContext, command: Command) -> None:
        raise NotImplementedError
