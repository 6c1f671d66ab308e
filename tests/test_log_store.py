# -*- coding: utf-8 -*-
"""
Tests for the local key/value storage and the entry log store.
"""

import json

import pytest

from athena.models.log_entry import EntryType, VehicleEntry, VisitorEntry
from athena.repositories.local_storage import LocalStorage
from athena.repositories.log_store import EntryLogStore
from athena.services.exceptions import DuplicateEntryError, StorageException


def make_visitor(entry_id, name="Ali"):
    return VisitorEntry(entry_id=entry_id, timestamp="2024-01-15T10:30:00.000Z", visitor_name=name)


def make_vehicle(entry_id, driver="Youssef"):
    return VehicleEntry(entry_id=entry_id, timestamp="2024-01-15T10:30:00.000Z", driver_name=driver)


class TestLocalStorage:

    def test_missing_key_returns_none(self, storage):
        """Unknown keys read as None."""
        assert storage.get_item("athena_logs") is None
        assert not storage.has_item("athena_logs")

    def test_set_then_get(self, storage, tmp_path):
        """Values are written to a JSON file named after the key."""
        storage.set_item("athena_logs", "[]")
        assert storage.get_item("athena_logs") == "[]"
        assert (tmp_path / "athena_logs.json").read_text(encoding="utf-8") == "[]"

    def test_remove_item(self, storage):
        """Removed keys read as None."""
        storage.set_item("k", "v")
        storage.remove_item("k")
        assert storage.get_item("k") is None

    def test_invalid_key_rejected(self, storage):
        """Keys cannot escape the data directory."""
        with pytest.raises(ValueError):
            storage.get_item("../escape")

    def test_unwritable_directory_raises(self, tmp_path):
        """Write errors raise StorageException."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(StorageException) as exc_info:
            LocalStorage(blocker).set_item("athena_logs", "[]")
        assert exc_info.value.key == "athena_logs"


class TestLoading:
    """Startup loading of the stored log."""

    def test_missing_data_gives_empty_log(self, storage):
        """No stored data loads as an empty log."""
        store = EntryLogStore(storage)
        assert store.load() == ()
        assert len(store) == 0

    def test_invalid_json_gives_empty_log(self, storage):
        """Corrupt JSON loads as an empty log."""
        storage.set_item("athena_logs", "{not json")
        assert EntryLogStore(storage).load() == ()

    def test_non_list_gives_empty_log(self, storage):
        """A stored object that is not a list loads as an empty log."""
        storage.set_item("athena_logs", json.dumps({"id": "1", "type": "VISITOR"}))
        assert EntryLogStore(storage).load() == ()

    def test_bad_records_are_skipped(self, storage):
        """Undecodable records are dropped, valid ones kept."""
        payload = [
            make_visitor("a").to_dict(),
            {"id": "b", "type": "UNKNOWN"},
            "garbage",
            make_vehicle("c").to_dict(),
            make_visitor("a", name="Duplicate").to_dict(),
        ]
        storage.set_item("athena_logs", json.dumps(payload))

        entries = EntryLogStore(storage).load()

        assert [entry.entry_id for entry in entries] == ["a", "c"]
        assert entries[0].visitor_name == "Ali"

    def test_load_keeps_stored_order(self, storage):
        """Loading keeps the newest-first stored order."""
        payload = [make_visitor("new").to_dict(), make_visitor("old").to_dict()]
        storage.set_item("athena_logs", json.dumps(payload))
        store = EntryLogStore(storage)
        store.load()
        assert [entry.entry_id for entry in store] == ["new", "old"]


class TestAppend:
    """Appending entries."""

    def test_append_prepends_and_persists(self, store, storage):
        """New entries go first and are written immediately."""
        store.append(make_visitor("1"))
        store.append(make_vehicle("2"))

        assert [entry.entry_id for entry in store.entries] == ["2", "1"]

        stored = json.loads(storage.get_item("athena_logs"))
        assert [item["id"] for item in stored] == ["2", "1"]
        assert stored[0]["type"] == "VEHICLE"

    def test_reload_gives_same_entries(self, store, storage):
        """A fresh store reads back the same entries."""
        store.append(make_visitor("1"))
        store.append(make_vehicle("2"))

        reloaded = EntryLogStore(storage)
        assert reloaded.load() == store.entries

    def test_duplicate_id_rejected(self, store):
        """An id already in the log cannot be appended."""
        store.append(make_visitor("1"))
        with pytest.raises(DuplicateEntryError):
            store.append(make_vehicle("1"))
        assert len(store) == 1
        assert isinstance(store.get("1"), VisitorEntry)

    def test_failed_write_leaves_log_unchanged(self, tmp_path):
        """A failed write does not change the in-memory log."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")
        store = EntryLogStore(LocalStorage(blocker))
        store.load()

        with pytest.raises(StorageException):
            store.append(make_visitor("1"))
        assert len(store) == 0

    def test_non_ascii_is_stored_verbatim(self, store, tmp_path):
        """Arabic text is written unescaped."""
        store.append(make_visitor("1", name="سعيد"))
        assert "سعيد" in (tmp_path / "athena_logs.json").read_text(encoding="utf-8")

    def test_counts_by_type(self, store):
        """Entries are counted per type."""
        store.append(make_visitor("1"))
        store.append(make_visitor("2"))
        store.append(make_vehicle("3"))
        assert store.counts_by_type() == {EntryType.VISITOR: 2, EntryType.VEHICLE: 1}

    def test_entries_snapshot_is_detached(self, store):
        """The entries tuple does not change after an append."""
        snapshot = store.entries
        store.append(make_visitor("1"))
        assert snapshot == ()
