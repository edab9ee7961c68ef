"""Keyword-based relevance scoring of changelog entries."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from depwatch.changelog.transform import Entry

_SECURITY_TERMS = ("security", "cve", "vuln", "exploit", "patch", "advisory")


def _is_security(keyword: str) -> bool:
    return any(term in keyword for term in _SECURITY_TERMS)


class Scorer:
    """Scores entries by counting keyword occurrences in body and version.

    Matching is case-insensitive. Each occurrence is worth one point, or two
    for security-related keywords.
    """

    def __init__(self, keywords: Iterable[str] | None = None) -> None:
        self.keywords: list[str] = list(keywords or ())

    def score(self, entry: Entry) -> int:
        """Return a non-negative relevance score for ``entry``."""
        body = entry.body.lower()
        version = entry.version.lower()
        total = 0
        for keyword in self.keywords:
            lower = keyword.lower()
            count = body.count(lower) + version.count(lower)
            if count:
                total += count * (2 if _is_security(lower) else 1)
        return total

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of the entries with their ``score`` field set."""
        return [dataclasses.replace(e, score=self.score(e)) for e in entries]