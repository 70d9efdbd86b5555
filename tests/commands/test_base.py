"""Tests for the BaseHandler error boundary."""

from __future__ import annotations

import lmdb
import pytest

from lmdbctl.commands import BaseHandler
from lmdbctl.shell.context import SessionContext
from lmdbctl.shell.errors import NotFound
from lmdbctl.shell.resolver import Command


class _StoreFailure(BaseHandler):
    verbs = ("scan",)

    def execute(self, context: SessionContext, command: Command) -> None:
        context.prepare_cursor(None)
        raise lmdb.Error("simulated store failure")


class _NotFound(BaseHandler):
    verbs = ("get",)

    def execute(self, context: SessionContext, command: Command) -> None:
        raise NotFound


class TestRun:
    def test_success(self, context: SessionContext) -> None:
        class _Noop(BaseHandler):
            def execute(self, context: SessionContext, command: Command) -> None:
                return None

        result = _Noop().run(context, Command(verb="stat"))
        assert result.ok is True
        assert result.op == "stat"
        assert result.error is None

    def test_shell_error_becomes_result(self, context: SessionContext) -> None:
        result = _NotFound().run(context, Command(verb="get", key=b"k"))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "key not found"

    def test_store_error_closes_cursor(self, context: SessionContext) -> None:
        result = _StoreFailure().run(context, Command(verb="scan"))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "STORE_ERROR"
        assert "simulated store failure" in result.error.message
        assert result.error.detail == {"error_type": "Error"}
        assert context.cursor is None

    def test_execute_is_abstract(self, context: SessionContext) -> None:
        with pytest.raises(NotImplementedError):
            BaseHandler().execute(context, Command(verb="stat"))
