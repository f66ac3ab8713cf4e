import orjson
import pytest

from calgrid.data import DocumentStoreError, JsonDocumentStore


def test_store_creates_file_with_default_collections(document_store):
    assert document_store.find("events") == []

    saved = orjson.loads(document_store.path.read_bytes())
    assert saved["users"] == [] and saved["events"] == []


def test_insert_find_update_delete(document_store):
    document_store.insert_unique("events", {"id": "a", "title": "One", "created_by": "u1"}, key="id")
    document_store.insert_unique("events", {"id": "b", "title": "Two", "created_by": "u2"}, key="id")

    assert [doc["id"] for doc in document_store.find("events", created_by="u1")] == ["a"]

    updated = document_store.update("events", "a", {"title": "Uno"})
    assert updated == {"id": "a", "title": "Uno", "created_by": "u1"}
    assert document_store.update("events", "zzz", {"title": "x"}) is None

    assert document_store.delete("events", "b")
    assert not document_store.delete("events", "b")
    assert document_store.find_one("events", id="b") is None


def test_find_returns_copies(document_store):
    document_store.insert_unique("events", {"id": "a", "title": "One"}, key="id")

    document_store.find_one("events", id="a")["title"] = "mutated"

    assert document_store.find_one("events", id="a")["title"] == "One"


def test_documents_survive_reopen(tmp_path):
    path = tmp_path / "store.json"
    JsonDocumentStore(path).insert_unique("users", {"id": "u1", "username": "ada"}, key="username")

    assert JsonDocumentStore(path).find_one("users", username="ada")["id"] == "u1"


def test_missing_collections_are_backfilled(tmp_path):
    path = tmp_path / "old.json"
    path.write_bytes(orjson.dumps({"users": [{"id": "u1"}]}))

    store = JsonDocumentStore(path)

    assert store.find("events") == []
    assert store.find_one("users", id="u1") == {"id": "u1"}


def test_corrupt_file_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DocumentStoreError):
        JsonDocumentStore(path).find("events")


def test_insert_unique_refuses_existing_key(document_store):
    assert document_store.insert_unique("users", {"id": "u1", "username": "ada"}, key="username")

    assert document_store.insert_unique("users", {"id": "u2", "username": "ada"}, key="username") is None
    assert [doc["id"] for doc in document_store.find("users")] == ["u1"]
