"""Persistent client-local key/value storage.

Values are JSON documents stored in a single file, rewritten on every
change. Without a path the storage lives in memory only.
"""

import json
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class LocalStorage:
    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else None
        self._data: dict = {}
        self._load()

    def _load(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            self._data = json.loads(self.path.read_text(encoding="utf-8")) or {}
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable local storage", path=str(self.path))
            self._data = {}

    def _flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def set(self, key: str, value) -> None:
        self._data[key] = value
        self._flush()

    def remove(self, *keys: str) -> None:
        for key in keys:
            self._data.pop(key, None)
        self._flush()

    def __contains__(self, key: str) -> bool:
        return key in self._data
