"""
Error taxonomy for the filing core.

The HTTP layer maps these onto distinct signals:
- ValidationError -> 400 (bad request)
- NotFoundError -> 404
- PersistenceError -> 500 (change kept in memory, not durably saved)
"""

from __future__ import annotations

from typing import Any


class FilingError(Exception):
    pass


class ValidationError(FilingError):
    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid document payload.")


class NotFoundError(FilingError):
    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        super().__init__(f"Document not found: {doc_id!r}")


class PersistenceError(FilingError):
    def __init__(self, message: str, *, document: Any = None):
        # The record whose mutation was applied in memory but not written out.
        self.document = document
        super().__init__(message)
