"""Ranking of dependencies by their aggregated entry scores."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from depwatch.changelog.transform import Entry


@dataclass
class TrendingEntry:
    """A dependency with its total score and number of entries."""

    dependency: str
    score: int = 0
    count: int = 0


class Trending:
    """Aggregates scores per dependency and ranks them.

    Ordered by total score descending, then entry count descending.
    ``top_n`` limits the result; zero or less returns all.
    """

    def __init__(self, top_n: int = 0) -> None:
        self.top_n = top_n

    def analyse(self, entries: Iterable[Entry] | None) -> list[TrendingEntry]:
        totals: dict[str, TrendingEntry] = {}
        for entry in entries or ():
            if not entry.dependency:
                continue
            agg = totals.setdefault(entry.dependency, TrendingEntry(entry.dependency))
            agg.score += entry.score
            agg.count += 1
        result = sorted(totals.values(), key=lambda t: (t.score, t.count), reverse=True)
        if self.top_n > 0:
            result = result[: self.top_n]
        return result