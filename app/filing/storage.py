from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path


class StorageError(RuntimeError):
    pass


class Storage:
    """A single persistence slot holding the serialized collection."""

    def read_text(self) -> str | None:
        raise NotImplementedError

    def write_text(self, data: str) -> None:
        raise NotImplementedError

    def exists(self) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class LocalStorage(Storage):
    path: Path

    def read_text(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

    def write_text(self, data: str) -> None:
        # Write to a sibling temp file, then swap it in; readers never see a half-written file.
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(data)
                    fh.flush()
                    os.fsync(fh.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    def exists(self) -> bool:
        return self.path.exists()


@dataclass
class MemoryStorage(Storage):
    """Key/value slot (one key per collection), like a browser's local storage."""

    key: str = "documents"
    slots: dict[str, str] = field(default_factory=dict)

    def read_text(self) -> str | None:
        return self.slots.get(self.key)

    def write_text(self, data: str) -> None:
        self.slots[self.key] = data

    def exists(self) -> bool:
        return self.key in self.slots


def storage_from_config(config: dict) -> Storage:
    backend = (config.get("STORAGE_BACKEND") or "file").strip().lower()
    if backend == "memory":
        return MemoryStorage(key=(config.get("STORAGE_KEY") or "documents").strip())
    if backend != "file":
        raise StorageError(f"Unknown STORAGE_BACKEND: {backend!r} (expected 'file' or 'memory')")
    db_file = (config.get("DB_FILE") or "").strip() or os.path.join(os.getcwd(), "db.json")
    return LocalStorage(path=Path(db_file))
