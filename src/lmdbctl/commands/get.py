"""Commands: get, exists."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from lmdbctl.commands._base import BaseHandler
from lmdbctl.shell.errors import MalformedValue, NotFound

if TYPE_CHECKING:
    from lmdbctl.shell.context import SessionContext
    from lmdbctl.shell.resolver import Command

JSON_INDENT = "    "
_JSON_SPACE = frozenset(" \t\n\r")


def _reject_constant(name: str) -> None:
    msg = f"{name} is not a JSON value"
    raise ValueError(msg)


def reindent_json(data: bytes) -> bytes:
    """Re-indent a JSON document with 4 spaces per level.

    Only insignificant whitespace changes: strings and numbers are copied
    verbatim, key order and duplicate keys are kept, and empty objects and
    arrays stay on one line.

    Raises:
        MalformedValue: *data* is not a UTF-8 encoded JSON document.
    """
    try:
        text = data.decode("utf-8")
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise MalformedValue(f"value is not valid JSON: {exc}") from exc

    out: list[str] = []
    depth = 0
    in_string = escaped = need_indent = False

    def newline() -> None:
        out.append("\n" + JSON_INDENT * depth)

    for ch in text:
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch in _JSON_SPACE:
            continue
        # Defer the newline after an opener so that {} and [] stay compact.
        if need_indent and ch not in "]}":
            need_indent = False
            depth += 1
            newline()
        if ch in "{[":
            out.append(ch)
            need_indent = True
        elif ch in "]}":
            if need_indent:
                need_indent = False
            else:
                depth -= 1
                newline()
            out.append(ch)
        elif ch == ",":
            out.append(ch)
            newline()
        elif ch == ":":
            out.append(": ")
        else:
            if ch == '"':
                in_string = True
            out.append(ch)
    return "".join(out).encode("utf-8")


class GetHandler(BaseHandler):
    """Print the value stored under a key, raw or re-indented as JSON."""

    verbs = ("get",)

    def execute(self, context: SessionContext, command: Command) -> None:
        with context.within_read() as txn:
            data = txn.get(command.key)
        if data is None:
            raise NotFound
        if command.json_print:
            data = reindent_json(data)
        context.output(data)


class ExistsHandler(BaseHandler):
    """Print ``true`` or ``false``; absence is not an error."""

    verbs = ("exists",)

    def execute(self, context: SessionContext, command: Command) -> None:
        with context.within_read() as txn:
            found = txn.get(command.key) is not None
        context.output(b"true" if found else b"false")
