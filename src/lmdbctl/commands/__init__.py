"""Console command handlers.

Provides build_handlers(), the verb -> handler table the REPL dispatches
through.  Every verb of the resolver table must map to a handler.
"""

from __future__ import annotations

from lmdbctl.commands._base import BaseHandler
from lmdbctl.commands.admin import DEFAULT_EXPAND_FACTOR, ExitHandler, ExpandHandler, StatHandler
from lmdbctl.commands.get import ExistsHandler, GetHandler
from lmdbctl.commands.put import DelHandler, PutHandler
from lmdbctl.commands.scan import IterateHandler, KeysHandler, ScanHandler
from lmdbctl.shell.context import DEFAULT_PAGE_SIZE

__all__ = ["BaseHandler", "build_handlers"]


def build_handlers(
    *,
    page_size: int = DEFAULT_PAGE_SIZE,
    expand_factor: float = DEFAULT_EXPAND_FACTOR,
) -> dict[str, BaseHandler]:
    """Map every console verb to its handler instance."""
    handlers: list[BaseHandler] = [
        GetHandler(),
        ExistsHandler(),
        PutHandler(),
        DelHandler(),
        ScanHandler(page_size),
        KeysHandler(page_size),
        IterateHandler(page_size),
        StatHandler(),
        ExpandHandler(expand_factor),
        ExitHandler(),
    ]
    return {verb: handler for handler in handlers for verb in handler.verbs}
