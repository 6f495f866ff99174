#!/usr/bin/env python3
"""
Start the document filing API under gunicorn.

Usage:
    PORT=8080 DB_FILE=/data/db.json python scripts/start.py

Runs one worker process (with threads): each worker keeps its own in-memory
copy of the collection and rewrites the whole JSON file on every change, so
a second process would overwrite the first one's edits.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_PORT = 8080


def _resolve_port(raw: str | None) -> int:
    raw = (raw or "").strip()
    if not raw:
        print(f"filing: PORT not set, listening on {DEFAULT_PORT}", flush=True)
        return DEFAULT_PORT
    if not raw.isdigit() or not 0 < int(raw) < 65536:
        raise SystemExit(f"filing: PORT must be a number between 1 and 65535, got {raw!r}")
    return int(raw)


def main() -> None:
    port = _resolve_port(os.environ.get("PORT"))
    db_file = os.environ.get("DB_FILE") or "./db.json"
    print(f"filing: serving documents from {db_file} on 0.0.0.0:{port} (health: /healthz)", flush=True)

    # exec so gunicorn becomes PID 1 and handles signals directly
    os.execvp(
        "gunicorn",
        [
            "gunicorn",
            "app.wsgi:app",
            "--bind", f"0.0.0.0:{port}",
            "--workers", "1",
            "--threads", "4",
            "--timeout", "60",
            "--access-logfile", "-",
            "--error-logfile", "-",
        ],
    )


if __name__ == "__main__":
    main()
