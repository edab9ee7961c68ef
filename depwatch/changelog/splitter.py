"""Partitioning of entries into per-dependency buckets."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.changelog.transform import Entry


class Splitter:
    """Groups entries by dependency, preserving their relative order."""

    def split(self, entries: Iterable[Entry] | None) -> dict[str, list[Entry]]:
        """Map each dependency name (possibly empty) to its entries."""
        buckets: dict[str, list[Entry]] = {}
        for entry in entries or ():
            buckets.setdefault(entry.dependency, []).append(entry)
        return buckets

    def keys(self, entries: Iterable[Entry] | None) -> list[str]:
        """Dependency names present in ``entries``, in first-seen order."""
        return list(dict.fromkeys(entry.dependency for entry in entries or ()))