"""
Tests for utils/store.py — JSON-file item store.
"""
import json

import pytest

from utils.errors import StorageError
from utils.store import ItemStore


class TestLoadAll:
    def test_returns_items_in_file_order(self, store, seed_items):
        assert store.load_all() == seed_items

    def test_reads_fresh_every_call(self, store, data_file):
        store.load_all()
        data_file.write_text(json.dumps([{"id": 9, "name": "X", "category": "Y", "price": 1}]))
        assert [i["id"] for i in store.load_all()] == [9]

    def test_missing_file_raises_storage_error(self, tmp_path):
        store = ItemStore(tmp_path / "nope.json")
        with pytest.raises(StorageError, match="Failed to read data"):
            store.load_all()

    def test_invalid_json_raises_storage_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(StorageError):
            ItemStore(path).load_all()

    def test_non_array_raises_storage_error(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text('{"items": []}')
        with pytest.raises(StorageError, match="JSON array"):
            ItemStore(path).load_all()

    def test_storage_error_maps_to_500(self, tmp_path):
        with pytest.raises(StorageError) as exc_info:
            ItemStore(tmp_path / "nope.json").load_all()
        assert exc_info.value.status_code == 500


class TestSaveAll:
    def test_overwrites_collection(self, store):
        store.save_all([{"id": 7, "name": "Lamp", "category": "Home", "price": 20}])
        assert store.load_all() == [{"id": 7, "name": "Lamp", "category": "Home", "price": 20}]

    def test_writes_indented_json(self, store, data_file):
        store.save_all([{"id": 1, "name": "A", "category": "B", "price": 0}])
        assert data_file.read_text().startswith("[\n  {")

    @pytest.mark.parametrize("bad", [float("inf"), float("nan")])
    def test_non_finite_price_never_reaches_file(self, store, data_file, bad):
        before = data_file.read_text()
        with pytest.raises(StorageError):
            store.save_all([{"id": 1, "name": "A", "category": "B", "price": bad}])
        assert data_file.read_text() == before

    def test_write_into_missing_directory_raises(self, tmp_path):
        store = ItemStore(tmp_path / "missing" / "items.json")
        with pytest.raises(StorageError, match="Failed to write data"):
            store.save_all([])


class TestAppend:
    def test_appends_at_end(self, store):
        new = {"id": 6, "name": "Lamp", "category": "Home", "price": 20.0}
        assert store.append(new) == new
        items = store.load_all()
        assert len(items) == 6
        assert items[-1] == new

    def test_append_to_unreadable_store_raises(self, tmp_path):
        with pytest.raises(StorageError):
            ItemStore(tmp_path / "nope.json").append({"id": 1})


class TestLastModified:
    def test_fingerprint_changes_after_write(self, store):
        before = store.last_modified()
        store.append({"id": 6, "name": "Lamp", "category": "Home", "price": 20.0})
        assert store.last_modified() != before

    def test_fingerprint_stable_without_write(self, store):
        assert store.last_modified() == store.last_modified()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(StorageError):
            ItemStore(tmp_path / "nope.json").last_modified()


def test_count_and_exists(store, tmp_path):
    assert store.count() == 5
    assert store.exists() is True
    assert ItemStore(tmp_path / "nope.json").exists() is False
