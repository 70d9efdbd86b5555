"""Shared pytest fixtures and test helpers for lmdbctl tests."""

from __future__ import annotations

from collections.abc import Iterator
from io import BytesIO
from pathlib import Path

import pytest
from click.testing import CliRunner

from lmdbctl.commands import BaseHandler, build_handlers
from lmdbctl.infrastructure.store import Store
from lmdbctl.output.sink import OutputSink
from lmdbctl.shell.context import SessionContext
from lmdbctl.shell.repl import dispatch

TEST_MAP_SIZE = 8 * 1024 * 1024


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Directory for a fresh LMDB environment."""
    return tmp_path / "db"


@pytest.fixture
def store(db_path: Path) -> Iterator[Store]:
    """Writable LMDB environment on a temp directory."""
    s = Store.open(db_path, map_size=TEST_MAP_SIZE)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def buffer() -> BytesIO:
    """Captured console output."""
    return BytesIO()


@pytest.fixture
def context(store: Store, buffer: BytesIO) -> Iterator[SessionContext]:
    """Session over the temp store, writing to ``buffer``.

    Closes the cursor and the store on teardown.
    """
    ctx = SessionContext(store, OutputSink(buffer))
    try:
        yield ctx
    finally:
        ctx.close()


@pytest.fixture
def handlers() -> dict[str, BaseHandler]:
    """Default handler table with a small page size."""
    return build_handlers(page_size=2)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def lines(buffer: BytesIO) -> list[bytes]:
    """Output lines written so far, then reset the buffer."""
    out = buffer.getvalue().splitlines()
    buffer.seek(0)
    buffer.truncate()
    return out


def seed(store: Store, items: dict[bytes, bytes]) -> None:
    """Write *items* in one committed transaction."""
    with store.begin(write=True) as txn:
        for key, value in items.items():
            txn.put(key, value)


def run_line(
    context: SessionContext,
    handlers: dict[str, BaseHandler],
    buffer: BytesIO,
    line: bytes,
) -> list[bytes]:
    """Dispatch one line, assert success, and return its output lines."""
    result = dispatch(context, handlers, line)
    assert result.ok, result.error
    return lines(buffer)
