"""LMDB environment adapter.

The console works against the default (unnamed) database of a single
environment directory.  The map size is sized from the existing
``data.mdb`` file times a growth factor so an environment can be reopened
with room to grow (or shrunk, with a factor below 1).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import lmdb

logger = logging.getLogger(__name__)

DATA_FILENAME = "data.mdb"
DEFAULT_MAP_SIZE = 32 * 1024 * 1024


def estimate_map_size(
    path: Path,
    factor: float,
    *,
    default: int = DEFAULT_MAP_SIZE,
) -> int:
    """Map size for *path*: ``data.mdb`` size times *factor*, or *default*.

    Raises:
        OSError: The data file exists but cannot be inspected.
    """
    try:
        size = (path / DATA_FILENAME).stat().st_size
    except FileNotFoundError:
        return default
    return int(size * factor)


class Store:
    """An open LMDB environment.

    Owned by the session for the whole process lifetime and closed at
    shutdown.  Transactions are handed out raw; scoping (commit / abort)
    belongs to :class:`~lmdbctl.shell.context.SessionContext`.
    """

    def __init__(self, env: lmdb.Environment, path: Path, *, read_only: bool = False) -> None:
        self._env = env
        self._path = path
        self._read_only = read_only

    @classmethod
    def open(cls, path: Path, *, map_size: int, read_only: bool = False) -> Store:
        """Open (or create, unless *read_only*) the environment at *path*.

        Raises:
            lmdb.Error: The environment could not be opened.
        """
        env = lmdb.open(
            str(path),
            map_size=map_size,
            subdir=True,
            readonly=read_only,
            create=not read_only,
        )
        logger.debug("Opened environment %s (map_size=%d, read_only=%s)", path, map_size, read_only)
        return cls(env, path, read_only=read_only)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def map_size(self) -> int:
        return int(self._env.info()["map_size"])

    def begin(self, *, write: bool = False) -> lmdb.Transaction:
        """Start a raw transaction on the default database."""
        return self._env.begin(write=write)

    def stat(self) -> dict[str, Any]:
        """Environment statistics merged with the map/reader info."""
        stat = self._env.stat()
        info = self._env.info()
        return {
            "entries": stat["entries"],
            "depth": stat["depth"],
            "branch_pages": stat["branch_pages"],
            "leaf_pages": stat["leaf_pages"],
            "overflow_pages": stat["overflow_pages"],
            "psize": stat["psize"],
            "map_size": info["map_size"],
            "last_pgno": info["last_pgno"],
            "last_txnid": info["last_txnid"],
            "max_readers": info["max_readers"],
            "num_readers": info["num_readers"],
        }

    def expand(self, factor: float) -> int:
        """Grow the map size by *factor*.  Returns the new size.

        No transaction may be open in this process while resizing.
        """
        new_size = int(self.map_size * factor)
        self._env.set_mapsize(new_size)
        logger.debug("Resized map of %s to %d bytes", self._path, new_size)
        return new_size

    def close(self) -> None:
        self._env.close()
