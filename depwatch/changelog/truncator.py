"""Per-dependency cap on the number of entries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from depwatch.changelog.transform import Entry


class Truncator:
    """Keeps at most ``max_per_dep`` entries per dependency; zero or less keeps all."""

    def __init__(self, max_per_dep: int) -> None:
        self.max_per_dep = max_per_dep

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return entries in their original order with the cap enforced."""
        entries = list(entries)
        if self.max_per_dep <= 0:
            return entries
        counts: Counter[str] = Counter()
        out = []
        for entry in entries:
            if counts[entry.dependency] < self.max_per_dep:
                out.append(entry)
                counts[entry.dependency] += 1
        return out