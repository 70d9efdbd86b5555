"""SessionContext — the single owner of store, cursor, and output sink.

Created once at startup and passed explicitly to every handler.  It
provides the two transaction scopes every command runs in and the
lifecycle of the one range cursor a session may hold:

- **Read scope**: the transaction is always released on exit; reads
  never commit.
- **Write scope**: commit on normal exit; on any exception the
  transaction is aborted and the exception propagates unchanged, so a
  failing ``put``/``del`` never leaves a partial mutation behind.
- **Cursor**: at most one is open.  Opening a new one closes the old one,
  and the REPL closes it before any command other than ``it``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from lmdbctl.shell.cursor import RangeCursor

if TYPE_CHECKING:
    from collections.abc import Iterator

    import lmdb

    from lmdbctl.infrastructure.store import Store
    from lmdbctl.output.sink import OutputSink

logger = logging.getLogger(__name__)

OK = b"OK"
SCAN_MORE = b'"it" for more'
DEFAULT_PAGE_SIZE = 10


class SessionContext:
    """Session state shared by every command of one console session.

    Attributes:
        store: The open environment (owned; closed by :meth:`close`).
        cursor: The open range cursor, if any.
        running: False once ``exit``/``quit`` has been dispatched.
    """

    def __init__(
        self,
        store: Store,
        sink: OutputSink,
        *,
        prompt: str = "> ",
        interactive: bool = False,
    ) -> None:
        self.store = store
        self.cursor: RangeCursor | None = None
        self.running = True
        self._sink = sink
        self._prompt = prompt
        self._interactive = interactive

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def color(self) -> bool:
        return self._sink.is_terminal

    def output(self, data: bytes | None) -> None:
        self._sink.write(data)

    def output_text(self, text: str) -> None:
        self._sink.write_text(text)

    def prompt(self) -> None:
        """Show the input prompt (interactive sessions only)."""
        if self._interactive:
            self._sink.write_prompt(self._prompt)

    # ------------------------------------------------------------------
    # Transaction scopes
    # ------------------------------------------------------------------

    @contextmanager
    def within_read(self) -> Iterator[lmdb.Transaction]:
        """Run a block inside a read-only transaction, always released."""
        txn = self.store.begin(write=False)
        try:
            yield txn
        finally:
            txn.abort()

    @contextmanager
    def within_write(self) -> Iterator[lmdb.Transaction]:
        """Run a block inside a write transaction.

        Commits when the block exits normally.  Any exception aborts the
        transaction and is re-raised unchanged.

        Usage::

            with context.within_write() as txn:
                txn.put(key, value)
        """
        txn = self.store.begin(write=True)
        try:
            yield txn
        except BaseException:
            txn.abort()
            logger.debug("Aborted write transaction")
            raise
        txn.commit()
        logger.debug("Committed write transaction")

    # ------------------------------------------------------------------
    # Cursor lifecycle
    # ------------------------------------------------------------------

    def prepare_cursor(self, prefix: bytes | None, *, include_values: bool = True) -> RangeCursor:
        """Open a new range cursor, replacing any open one."""
        self.close_cursor()
        txn = self.store.begin(write=False)
        try:
            self.cursor = RangeCursor(txn, prefix=prefix, include_values=include_values)
        except BaseException:
            txn.abort()
            raise
        logger.debug("Opened cursor (prefix=%r, include_values=%s)", prefix, include_values)
        return self.cursor

    def close_cursor(self) -> None:
        """Close the open cursor, if any.  Safe to call repeatedly."""
        cursor, self.cursor = self.cursor, None
        if cursor is not None:
            cursor.close()

    def iterate(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Emit up to *page_size* entries from the open cursor.

        Leaving the prefix or reaching the end of the keyspace closes the
        cursor and stops quietly.  A store error closes the cursor and
        propagates.  A full page is followed by the continuation marker,
        and the cursor stays open for the next ``it``.  No-op when no
        cursor is open.
        """
        cursor = self.cursor
        if cursor is None:
            return
        for _ in range(page_size):
            try:
                found = cursor.advance()
            except Exception:
                self.close_cursor()
                raise
            if not found or not cursor.in_range():
                self.close_cursor()
                return
            self.output(cursor.key)
            if cursor.include_values:
                self.output(cursor.value)
        self.output(SCAN_MORE)

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def request_exit(self) -> None:
        self.running = False

    def close(self) -> None:
        """Release the cursor and the store handle."""
        self.close_cursor()
        self.store.close()
