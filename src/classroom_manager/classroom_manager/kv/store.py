"""Key-value document store used by the serverless backend variant.

Every entity is one JSON document under ``<prefix>:<id>``; listing is a
prefix scan. ``InMemoryKeyValueStore`` backs local runs and tests.
"""

from __future__ import annotations

import json
import threading
from typing import Any, Optional, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def set(self, key: str, value: dict) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> bool:
        raise NotImplementedError

    def get_by_prefix(self, prefix: str) -> list[dict]:
        """Documents whose key starts with ``prefix``, in key insertion order."""

        raise NotImplementedError

    def next_id(self, prefix: str) -> int:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self):
        self._data: dict[str, str] = {}
        self._counters: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[dict]:
        with self._lock:
            raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def set(self, key: str, value: dict) -> None:
        # Stored as JSON text so callers never share mutable state with the store.
        raw = json.dumps(value, ensure_ascii=False, default=_json_default)
        with self._lock:
            self._data[key] = raw

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def get_by_prefix(self, prefix: str) -> list[dict]:
        with self._lock:
            raws = [v for k, v in self._data.items() if k.startswith(prefix)]
        return [json.loads(v) for v in raws]

    def next_id(self, prefix: str) -> int:
        with self._lock:
            self._counters[prefix] = self._counters.get(prefix, 0) + 1
            return self._counters[prefix]


def _json_default(value: Any):
    if hasattr(value, "isoformat"):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
