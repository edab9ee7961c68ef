"""File-backed store of the last changelog version seen per dependency.

State is kept as a JSON object on disk so it survives restarts. All
methods are safe for concurrent use.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path


class Store:
    """Persists the last-seen version for each dependency key."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()
        self._data: dict[str, str] = {}
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"store: {self.path} does not hold a JSON object")
        self._data = {str(k): str(v) for k, v in data.items()}

    def last_seen(self, key: str) -> str:
        """Return the last-seen version for ``key``, or ``""`` if never recorded."""
        with self._lock:
            return self._data.get(key, "")

    def set_last_seen(self, key: str, version: str) -> None:
        """Record ``version`` for ``key`` and write the store to disk at once."""
        with self._lock:
            self._data[key] = version
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")