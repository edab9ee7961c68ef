"""Compact single-line summaries of entry bodies."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable

from depwatch.changelog.transform import Entry

DEFAULT_SUMMARY_LENGTH = 120
ELLIPSIS = "…"


class Summarizer:
    """Collapses whitespace in bodies and caps them at ``max_runes`` characters.

    Truncated bodies get an ellipsis appended. Values below 1 fall back to
    the default length.
    """

    def __init__(self, max_runes: int = DEFAULT_SUMMARY_LENGTH) -> None:
        self.max_runes = max_runes if max_runes > 0 else DEFAULT_SUMMARY_LENGTH

    def _summarize(self, body: str) -> str:
        flat = " ".join(body.split())
        if len(flat) <= self.max_runes:
            return flat
        return flat[: self.max_runes] + ELLIPSIS

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of the entries with summarized bodies."""
        return [dataclasses.replace(e, body=self._summarize(e.body)) for e in entries]