"""RangeCursor — a prefix-bounded LMDB cursor that outlives one command.

LMDB cursors live inside a transaction, so each RangeCursor owns a
dedicated read-only transaction for as long as it is open.  That lets a
scan be continued across REPL turns (``it``) without holding any other
transaction open in between.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import lmdb

logger = logging.getLogger(__name__)


class RangeCursor:
    """Sequential traversal of the key order, optionally bounded by *prefix*.

    The first :meth:`advance` seeks to the first key ``>= prefix`` when a
    prefix is set; every other step moves to the next key.  A closed
    cursor must not be advanced again; :meth:`close` is idempotent.
    """

    def __init__(
        self,
        txn: lmdb.Transaction,
        *,
        prefix: bytes | None = None,
        include_values: bool = True,
    ) -> None:
        self.prefix = prefix
        self.include_values = include_values
        self._txn = txn
        self._cursor = txn.cursor()
        self._positioned = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def key(self) -> bytes:
        return self._cursor.key()

    @property
    def value(self) -> bytes:
        return self._cursor.value()

    def advance(self) -> bool:
        """Move to the next entry.  Returns False at end of range.

        Raises:
            lmdb.Error: The store failed while positioning the cursor.
        """
        if self._closed:
            msg = "advance() on a closed cursor"
            raise RuntimeError(msg)
        if not self._positioned and self.prefix is not None:
            found = self._cursor.set_range(self.prefix)
        else:
            found = self._cursor.next()
        self._positioned = True
        return found

    def in_range(self) -> bool:
        """Whether the current key still carries the prefix bound."""
        return self.prefix is None or self.key.startswith(self.prefix)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._cursor.close()
        self._txn.abort()
        logger.debug("Closed cursor (prefix=%r)", self.prefix)
