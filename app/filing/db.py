from __future__ import annotations

from flask import Flask, current_app

from app.filing.storage import storage_from_config
from app.filing.store import Store


def init_store(app: Flask) -> Store:
    """Build the configured storage backend, load the collection once and attach it to the app."""
    storage = storage_from_config(app.config)
    store = Store(storage)
    store.load()
    app.extensions["document_store"] = store
    app.logger.info("Document store ready (backend=%s)", type(storage).__name__)
    return store


def document_store(app: Flask | None = None) -> Store:
    """
    App-scoped store. Use inside request handlers.
    """
    if app is None:
        app = current_app  # type: ignore[assignment]
    return app.extensions["document_store"]
