"""
In-memory document collection backed by a single persistence slot.

Every mutation is followed by `persist()`, which serializes the whole
`{documents, users, settings}` document and overwrites the slot. There are
no partial updates; the last writer wins.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any

from app.filing.errors import PersistenceError
from app.filing.models import DocumentRecord
from app.filing.storage import Storage, StorageError

logger = logging.getLogger(__name__)


def empty_database() -> dict[str, Any]:
    return {"documents": [], "users": [], "settings": {}}


class Store:
    def __init__(self, storage: Storage):
        self.storage = storage
        self.lock = threading.RLock()
        self._documents: list[DocumentRecord] = []
        self._users: list[Any] = []
        self._settings: dict[str, Any] = {}

    # ---------- Load / persist ----------
    def load(self) -> list[DocumentRecord]:
        """
        Read the full collection from storage.

        Missing or unparsable data leaves an empty collection; the failure is
        logged and never raised, so the app can still start.
        """
        with self.lock:
            db = empty_database()
            try:
                raw = self.storage.read_text()
                if raw is None:
                    logger.info("No stored documents found; starting with an empty collection")
                else:
                    parsed = json.loads(raw)
                    db = _coerce_database(parsed)
            except (StorageError, ValueError) as e:
                logger.error("Error loading document store: %s", e)
                db = empty_database()

            docs: list[DocumentRecord] = []
            for item in db["documents"]:
                if not isinstance(item, dict):
                    logger.warning("Skipping malformed stored document: %r", item)
                    continue
                docs.append(DocumentRecord.from_dict(item))

            self._documents = docs
            self._users = db["users"]
            self._settings = db["settings"]
            logger.info("Loaded %d document(s)", len(docs))
            return list(self._documents)

    def persist(self, *, document: DocumentRecord | None = None) -> None:
        """
        Serialize and overwrite the stored collection.

        On failure the in-memory state is kept and PersistenceError is raised
        (carrying `document`, the record that was just changed, if any).
        """
        with self.lock:
            payload = json.dumps(self.to_database(), indent=2, ensure_ascii=False)
            try:
                self.storage.write_text(payload)
            except StorageError as e:
                logger.error("Error saving document store: %s", e)
                raise PersistenceError(
                    "Change applied but could not be saved to storage.",
                    document=document,
                ) from e

    def to_database(self) -> dict[str, Any]:
        return {
            "documents": [d.to_dict() for d in self._documents],
            "users": self._users,
            "settings": self._settings,
        }

    # ---------- Reads ----------
    def snapshot(self) -> list[DocumentRecord]:
        with self.lock:
            return list(self._documents)

    def find(self, doc_id: str) -> DocumentRecord | None:
        with self.lock:
            for d in self._documents:
                if d.id == doc_id:
                    return d
            return None

    def __len__(self) -> int:
        return len(self._documents)

    # ---------- Mutations (in memory only; callers persist) ----------
    def add(self, record: DocumentRecord) -> None:
        with self.lock:
            self._documents.append(record)

    def replace(self, record: DocumentRecord) -> bool:
        with self.lock:
            for i, d in enumerate(self._documents):
                if d.id == record.id:
                    self._documents[i] = record
                    return True
            return False

    def remove(self, doc_id: str) -> DocumentRecord | None:
        with self.lock:
            for i, d in enumerate(self._documents):
                if d.id == doc_id:
                    return self._documents.pop(i)
            return None


def _coerce_database(parsed: Any) -> dict[str, Any]:
    if isinstance(parsed, list):
        # Browser-slot shape: the slot holds the bare documents array.
        return {"documents": parsed, "users": [], "settings": {}}
    if not isinstance(parsed, dict):
        raise ValueError(f"Stored data must be a JSON object, got {type(parsed).__name__}")
    db = empty_database()
    docs = parsed.get("documents")
    users = parsed.get("users")
    settings = parsed.get("settings")
    db["documents"] = docs if isinstance(docs, list) else []
    db["users"] = users if isinstance(users, list) else []
    db["settings"] = settings if isinstance(settings, dict) else {}
    return db
