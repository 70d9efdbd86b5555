"""Tests for get and exists handlers."""

from __future__ import annotations

import json
from io import BytesIO

import pytest

from lmdbctl.commands import BaseHandler
from lmdbctl.commands.get import reindent_json
from lmdbctl.shell.context import SessionContext
from lmdbctl.shell.errors import MalformedValue
from lmdbctl.shell.repl import dispatch
from tests.conftest import lines, run_line, seed


class TestGet:
    def test_put_then_get(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        run_line(context, handlers, buffer, b"put greeting 'hello world'\n")
        assert run_line(context, handlers, buffer, b"get greeting\n") == [b"hello world"]

    def test_missing_key(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        result = dispatch(context, handlers, b"get nope\n")
        assert result.ok is False
        assert result.op == "get"
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert lines(buffer) == []

    def test_binary_value_passthrough(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        seed(context.store, {b"bin": b"\x00\xff\x10"})
        assert run_line(context, handlers, buffer, b"get bin\n") == [b"\x00\xff\x10"]

    def test_json_reindent(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        seed(context.store, {b"doc": b'{"b":1,"a":[true,null]}'})
        out = run_line(context, handlers, buffer, b"get doc json\n")
        assert out[0] == b"{"
        assert out[1] == b'    "b": 1,'
        assert json.loads(b"\n".join(out)) == {"b": 1, "a": [True, None]}

    def test_json_deeply_nested_keeps_session(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        seed(context.store, {b"doc": b"[" * 100_000 + b"]" * 100_000, b"k": b"v"})
        result = dispatch(context, handlers, b"get doc json\n")
        assert result.error is not None
        assert result.error.code == "MALFORMED_VALUE"
        assert run_line(context, handlers, buffer, b"get k\n") == [b"v"]

    def test_json_malformed(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        seed(context.store, {b"doc": b"not json"})
        result = dispatch(context, handlers, b"get doc json\n")
        assert result.error is not None
        assert result.error.code == "MALFORMED_VALUE"
        assert lines(buffer) == []


class TestReindentJson:
    def test_unicode_kept(self) -> None:
        assert reindent_json('{"k":"é"}'.encode()) == '{\n    "k": "é"\n}'.encode()

    def test_scalar(self) -> None:
        assert reindent_json(b"42") == b"42"

    def test_number_text_verbatim(self) -> None:
        raw = b'{"n":1e2,"f":1.10,"big":0.1000000000000000055511151231257827}'
        assert reindent_json(raw) == (
            b'{\n    "n": 1e2,\n    "f": 1.10,\n    "big": 0.1000000000000000055511151231257827\n}'
        )

    def test_duplicate_keys_kept(self) -> None:
        assert reindent_json(b'{"a":1,"a":2}') == b'{\n    "a": 1,\n    "a": 2\n}'

    def test_string_contents_untouched(self) -> None:
        raw = b'[" a , b ","q\\"{x}:",  "\\u00e9"]'
        assert reindent_json(raw) == b'[\n    " a , b ",\n    "q\\"{x}:",\n    "\\u00e9"\n]'

    def test_empty_containers_compact(self) -> None:
        assert reindent_json(b'{"a": { }, "b": [\n]}') == b'{\n    "a": {},\n    "b": []\n}'

    def test_nested_indent(self) -> None:
        assert reindent_json(b'{"a":[1,{"b":null}]}') == (
            b'{\n    "a": [\n        1,\n        {\n            "b": null\n        }\n    ]\n}'
        )

    @pytest.mark.parametrize(
        "raw", [b"", b"{", b"\xff\xfe\x00", b"NaN", b"[Infinity]", b'{"x": -Infinity}']
    )
    def test_invalid(self, raw: bytes) -> None:
        with pytest.raises(MalformedValue):
            reindent_json(raw)

    def test_deep_nesting_rejected(self) -> None:
        with pytest.raises(MalformedValue):
            reindent_json(b"[" * 100_000 + b"]" * 100_000)


class TestExists:
    def test_false_then_true(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        assert run_line(context, handlers, buffer, b"exists k\n") == [b"false"]
        run_line(context, handlers, buffer, b"put k v\n")
        assert run_line(context, handlers, buffer, b"exists k\n") == [b"true"]

    def test_empty_value_exists(
        self, context: SessionContext, handlers: dict[str, BaseHandler], buffer: BytesIO
    ) -> None:
        seed(context.store, {b"k": b""})
        assert run_line(context, handlers, buffer, b"exists k\n") == [b"true"]
