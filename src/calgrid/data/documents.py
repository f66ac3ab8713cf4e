from __future__ import annotations

import logging
import threading
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import orjson

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENTS: Dict[str, Any] = {
    "users": [],
    "events": [],
    "metadata": {"schema_version": 1},
}


class DocumentStoreError(RuntimeError):
    """Raised when the backing document file cannot be read or written."""


class JsonDocumentStore:
    """Collections of JSON documents persisted to a single file."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._state: Optional[Dict[str, Any]] = None
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_materialized(self) -> Dict[str, Any]:
        if self._state is not None:
            return self._state
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._state = deepcopy(DEFAULT_DOCUMENTS)
                self._write()
                return self._state
            raw = self._path.read_bytes()
            self._state = orjson.loads(raw) if raw else deepcopy(DEFAULT_DOCUMENTS)
        except (OSError, orjson.JSONDecodeError) as exc:
            raise DocumentStoreError(f"Unable to load documents from {self._path}: {exc}") from exc
        # Backfill collections added after the file was created.
        for key, value in DEFAULT_DOCUMENTS.items():
            if key not in self._state:
                self._state[key] = deepcopy(value)
        return self._state

    def _write(self) -> None:
        if self._state is None:
            return
        try:
            payload = orjson.dumps(self._state, option=orjson.OPT_INDENT_2)
            self._path.write_bytes(payload + b"\n")
        except OSError as exc:
            raise DocumentStoreError(f"Unable to write documents to {self._path}: {exc}") from exc

    def _collection(self, state: Dict[str, Any], name: str) -> List[Dict[str, Any]]:
        return state.setdefault(name, [])

    def mutate(self, callback: Callable[[Dict[str, Any]], Any]) -> Any:
        with self._lock:
            state = self._ensure_materialized()
            result = callback(state)
            self._write()
            return result

    def find(self, collection: str, **match: Any) -> List[Dict[str, Any]]:
        with self._lock:
            documents = self._collection(self._ensure_materialized(), collection)
            return [
                deepcopy(document)
                for document in documents
                if all(document.get(key) == value for key, value in match.items())
            ]

    def find_one(self, collection: str, **match: Any) -> Optional[Dict[str, Any]]:
        found = self.find(collection, **match)
        return found[0] if found else None

    def insert_unique(self, collection: str, document: Dict[str, Any], *, key: str) -> Optional[Dict[str, Any]]:
        """Insert unless a document with the same ``key`` value exists; returns None on conflict."""

        def _append_if_absent(state: Dict[str, Any]) -> Optional[Dict[str, Any]]:
            documents = self._collection(state, collection)
            if any(existing.get(key) == document.get(key) for existing in documents):
                return None
            stored = deepcopy(document)
            documents.append(stored)
            return deepcopy(stored)

        inserted = self.mutate(_append_if_absent)
        if inserted is None:
            logger.debug("Refused duplicate %s=%r in %s", key, document.get(key), collection)
        return inserted

    def update(self, collection: str, document_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        def _patch(state: Dict[str, Any]) -> Optional[Dict[str, Any]]:
            for document in self._collection(state, collection):
                if document.get("id") == document_id:
                    document.update(deepcopy(changes))
                    return deepcopy(document)
            return None

        return self.mutate(_patch)

    def delete(self, collection: str, document_id: str) -> bool:
        def _remove(state: Dict[str, Any]) -> bool:
            documents = self._collection(state, collection)
            for index, document in enumerate(documents):
                if document.get("id") == document_id:
                    del documents[index]
                    return True
            return False

        return self.mutate(_remove)
