"""Thread-safe in-memory store of the latest entries per dependency."""

from __future__ import annotations

import copy
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from depwatch.changelog.transform import Entry


@dataclass
class Snapshot:
    """Entries captured for one dependency at a point in time."""

    dependency: str
    entries: list[Entry] = field(default_factory=list)
    captured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SnapshotStore:
    """Keeps the most recent snapshot per dependency."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._store: dict[str, Snapshot] = {}

    def save(self, dep: str, entries: Iterable[Entry]) -> None:
        """Record a copy of ``entries`` for ``dep``, replacing any previous snapshot."""
        snapshot = Snapshot(
            dependency=dep,
            entries=copy.deepcopy(list(entries)),
            captured_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._store[dep] = snapshot

    def get(self, dep: str) -> Snapshot | None:
        """Return the latest snapshot for ``dep``, or ``None`` if there is none."""
        with self._lock:
            return self._store.get(dep)

    def all(self) -> list[Snapshot]:
        """Return all stored snapshots."""
        with self._lock:
            return list(self._store.values())

    def clear(self, dep: str) -> None:
        """Remove the snapshot for ``dep`` if present."""
        with self._lock:
            self._store.pop(dep, None)