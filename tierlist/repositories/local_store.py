# tierlist/repositories/local_store.py
# Durable local key-value store (localStorage semantics: string keys, string values)

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol


class LocalStore(Protocol):
    """Minimal key-value interface the custom item registry persists through."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Non-persistent store; contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store backed by one JSON object file: {"<key>": "<string value>", ...}.

    Every write replaces the whole file atomically (temp file + os.replace),
    so readers see either the previous or the new contents, never a mix.
    Read errors (unreadable or malformed file) propagate to the caller.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        raw = self.path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must contain a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError(f"value for '{key}' in {self.path} is not a string")
        return value

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            # unreadable contents get replaced rather than blocking writes
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
