#!/usr/bin/env python
"""
Seed the document store with the two demo records (gate pass + job card).

Only seeds when the store is empty, so it is safe to run repeatedly.

Usage:
    python scripts/seed_sample_data.py
    python scripts/seed_sample_data.py --db-file=/data/db.json

Environment:
    DB_FILE: path to the JSON document file (default ./db.json)
    STORAGE_BACKEND: must be "file" for seeding to be useful
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from app.filing.config import load_config
from app.filing.errors import PersistenceError
from app.filing.sample_data import seed_sample_documents
from app.filing.storage import storage_from_config
from app.filing.store import Store


def seed_only(*, db_file: str | None = None) -> int:
    config = load_config()
    if db_file:
        config["DB_FILE"] = db_file
    store = Store(storage_from_config(config))
    store.load()
    return seed_sample_documents(store)


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Seed sample documents into an empty store.")
    parser.add_argument("--db-file", default=None, help="Path to the JSON document file")
    args = parser.parse_args()

    try:
        added = seed_only(db_file=args.db_file)
    except PersistenceError as e:
        print(f"Seeding failed: {e}", flush=True)
        sys.exit(1)

    if added:
        print(f"Seeded {added} sample document(s).", flush=True)
    else:
        print("Store is not empty; nothing seeded.", flush=True)


if __name__ == "__main__":
    main()
