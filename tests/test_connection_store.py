"""Tests for the saved connection data file."""

import json
import os
import stat

import pytest

from repositories.connection_store import ConnectionStore


class TestConnectionStore:

    def test_load_missing_file(self, tmp_path):
        store = ConnectionStore(str(tmp_path / "data.json"))
        assert store.load() == {}

    def test_save_merges_and_persists(self, tmp_path):
        path = tmp_path / "nested" / "data.json"
        store = ConnectionStore(str(path))

        store.save({"connectUrl": "postgresql://u:p@h/db"})
        merged = store.save({"theme": "dark"})

        assert merged == {"connectUrl": "postgresql://u:p@h/db", "theme": "dark"}
        assert json.loads(path.read_text()) == merged
        assert ConnectionStore(str(path)).load() == merged

    def test_file_is_private(self, tmp_path):
        path = tmp_path / "data.json"
        ConnectionStore(str(path)).save({"connectUrl": "postgresql://u:p@h/db"})

        mode = stat.S_IMODE(os.stat(path).st_mode)
        assert mode == 0o600

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{not json")
        assert ConnectionStore(str(path)).load() == {}

    def test_clear(self, tmp_path):
        path = tmp_path / "data.json"
        store = ConnectionStore(str(path))
        store.save({"connectUrl": "x"})

        assert store.clear() is True
        assert not path.exists()
        assert store.clear() is False

    def test_unreadable_path_raises(self, tmp_path):
        store = ConnectionStore(str(tmp_path))
        with pytest.raises(OSError):
            store.load()
