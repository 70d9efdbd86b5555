"""REPL loop — read, tokenize, resolve, dispatch, report.

One command runs to completion before the next line is read.  Command
errors are reported and the loop continues; it stops only on
``exit``/``quit`` or end of input.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, BinaryIO

from lmdbctl.commands import build_handlers
from lmdbctl.output.renderers import render_error
from lmdbctl.services.result import ServiceResult
from lmdbctl.shell.errors import ShellError
from lmdbctl.shell.resolver import CONTINUE_VERB, resolve_command
from lmdbctl.shell.tokenizer import parse_input

if TYPE_CHECKING:
    from lmdbctl.commands import BaseHandler
    from lmdbctl.shell.context import SessionContext

logger = logging.getLogger(__name__)


def dispatch(
    context: SessionContext,
    handlers: dict[str, BaseHandler],
    line: bytes,
    *,
    matching_quotes: bool = False,
) -> ServiceResult:
    """Run one console line against *context*.

    Any open cursor is closed first unless the line resolves to the
    continuation command, so a cursor never survives an unrelated
    command (including one that fails to resolve).
    """
    args = parse_input(line, matching_quotes=matching_quotes)
    try:
        command = resolve_command(args)
    except ShellError as exc:
        context.close_cursor()
        return ServiceResult.failure("resolve", exc.code, exc.message)

    if command.verb != CONTINUE_VERB:
        context.close_cursor()
    logger.debug("Dispatching %s", command.verb)
    return handlers[command.verb].run(context, command)


def run_shell(
    context: SessionContext,
    stream: BinaryIO,
    handlers: dict[str, BaseHandler] | None = None,
    *,
    matching_quotes: bool = False,
    verbose: bool = False,
) -> None:
    """Read lines from *stream* until ``exit``/``quit`` or end of input."""
    if handlers is None:
        handlers = build_handlers()
    while context.running:
        context.prompt()
        line = stream.readline()
        if not line:
            break
        result = dispatch(context, handlers, line, matching_quotes=matching_quotes)
        if not result.ok:
            context.output_text(render_error(result, verbose=verbose, color=context.color))
