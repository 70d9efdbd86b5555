"""Tests for the LMDB environment adapter."""

from __future__ import annotations

from pathlib import Path

import lmdb
import pytest

from lmdbctl.infrastructure.store import DATA_FILENAME, DEFAULT_MAP_SIZE, Store, estimate_map_size
from tests.conftest import TEST_MAP_SIZE, seed


class TestEstimateMapSize:
    def test_missing_file_uses_default(self, tmp_path: Path) -> None:
        assert estimate_map_size(tmp_path, 2.0) == DEFAULT_MAP_SIZE

    def test_custom_default(self, tmp_path: Path) -> None:
        assert estimate_map_size(tmp_path, 2.0, default=1024) == 1024

    def test_scales_existing_file(self, tmp_path: Path) -> None:
        (tmp_path / DATA_FILENAME).write_bytes(b"\0" * 4096)
        assert estimate_map_size(tmp_path, 2.5) == 10240


class TestStore:
    def test_creates_environment(self, store: Store, db_path: Path) -> None:
        assert (db_path / DATA_FILENAME).exists()
        assert store.path == db_path
        assert store.read_only is False
        assert store.map_size == TEST_MAP_SIZE

    def test_stat_counts_entries(self, store: Store) -> None:
        seed(store, {b"a": b"1", b"b": b"2"})
        stat = store.stat()
        assert stat["entries"] == 2
        assert stat["map_size"] == TEST_MAP_SIZE
        assert set(stat) >= {"depth", "psize", "last_txnid", "num_readers"}

    def test_expand(self, store: Store) -> None:
        assert store.expand(2.0) == TEST_MAP_SIZE * 2
        assert store.map_size == TEST_MAP_SIZE * 2

    def test_read_only_missing_environment(self, tmp_path: Path) -> None:
        with pytest.raises(lmdb.Error):
            Store.open(tmp_path / "missing", map_size=TEST_MAP_SIZE, read_only=True)

    def test_reopen_read_only(self, db_path: Path) -> None:
        writable = Store.open(db_path, map_size=TEST_MAP_SIZE)
        seed(writable, {b"k": b"v"})
        writable.close()

        ro = Store.open(db_path, map_size=TEST_MAP_SIZE, read_only=True)
        try:
            assert ro.read_only is True
            with ro.begin() as txn:
                assert txn.get(b"k") == b"v"
        finally:
            ro.close()
