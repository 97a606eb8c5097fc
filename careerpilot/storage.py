"""String-by-key storage backends for simulator snapshots."""
from __future__ import annotations

import fcntl
import hashlib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from careerpilot.config import DATA_DIR
from careerpilot.log import get_logger

log = get_logger(__name__)


def _lock(f, exclusive: bool = True) -> None:
    """Advisory file lock (Unix fcntl)."""
    try:
        op = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
        fcntl.flock(f.fileno(), op)
    except (OSError, AttributeError):
        pass


def _unlock(f) -> None:
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except (OSError, AttributeError):
        pass


class Storage(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class MemoryStorage(Storage):
    """Process-local storage; the equivalent of a browser session store."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def keys(self) -> list[str]:
        return list(self._items)


class FileStorage(Storage):
    """One JSON file per key under ``directory``, so state survives restarts."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in key)[:60]
        digest = hashlib.sha256(key.encode()).hexdigest()[:8]
        return self.directory / f"{safe}_{digest}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            _lock(f, exclusive=False)
            value = f.read()
            _unlock(f)
        return value

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        with open(path, "w", encoding="utf-8") as f:
            _lock(f)
            f.write(value)
            _unlock(f)
        log.debug("Stored %s → %s", key, path.name)


def get_storage(settings: dict[str, Any]) -> Storage:
    storage_cfg = settings.get("storage") or {}
    backend = str(storage_cfg.get("backend", "memory")).lower()
    if backend == "file":
        directory = storage_cfg.get("dir") or DATA_DIR / "sessions"
        log.info("Using file storage at %s", directory)
        return FileStorage(directory)
    if backend != "memory":
        log.warning("Unknown storage backend %r — using memory", backend)
    return MemoryStorage()
