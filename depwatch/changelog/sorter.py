"""Ordering of changelog entries by date."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from depwatch.changelog.transform import Entry


class SortOrder(Enum):
    """Direction in which entries are ordered by date."""

    DESCENDING = 0
    ASCENDING = 1


class Sorter:
    """Sorts entries by date; entries without a date always go last."""

    def __init__(self, order: SortOrder = SortOrder.DESCENDING) -> None:
        self.order = order

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return a new, stably sorted list; the input is left untouched."""
        entries = list(entries)
        dated = [e for e in entries if e.date is not None]
        undated = [e for e in entries if e.date is None]
        dated.sort(key=lambda e: e.date, reverse=self.order is SortOrder.DESCENDING)
        return dated + undated