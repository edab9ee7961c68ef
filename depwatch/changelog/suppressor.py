"""Removal of entries belonging to suppressed dependencies."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.changelog.transform import Entry


def _normalise(name: str) -> str:
    return name.strip().lower()


class Suppressor:
    """Drops entries whose dependency is in a suppression list (case-insensitive)."""

    def __init__(self, deps: Iterable[str] | None = None) -> None:
        self.suppressed: frozenset[str] = frozenset(_normalise(d) for d in deps or ())

    def is_suppressed(self, dep: str) -> bool:
        """Whether ``dep`` is on the suppression list."""
        return _normalise(dep) in self.suppressed

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        return [e for e in entries if not self.is_suppressed(e.dependency)]