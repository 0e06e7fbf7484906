# tests/test_storage.py

import os

from core.storage import FileStore, MemoryStore


def test_memory_store_get_and_set():
    store = MemoryStore()

    assert store.get("key") is None

    store.set("key", "[]")
    assert store.get("key") == "[]"


def test_file_store_missing_key_is_none(file_store):
    assert file_store.get("zoroExamHistory") is None


def test_file_store_writes_one_file_per_key(file_store):
    file_store.set("zoroExamHistory", '[{"examName": "Math"}]')

    path = file_store.path_for("zoroExamHistory")
    assert os.path.exists(path)
    assert file_store.get("zoroExamHistory") == '[{"examName": "Math"}]'

    # no temporary files left behind
    assert os.listdir(file_store.dir_path) == ["zoroExamHistory.json"]


def test_file_store_overwrites(file_store):
    file_store.set("zoroExamHistory", "[1]")
    file_store.set("zoroExamHistory", "[]")

    assert file_store.get("zoroExamHistory") == "[]"


def test_file_store_reads_existing_directory(tmp_path):
    (tmp_path / "zoroExamHistory.json").write_text("[]", encoding="utf-8")

    assert FileStore(str(tmp_path)).get("zoroExamHistory") == "[]"
