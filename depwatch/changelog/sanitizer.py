"""Cleaning of raw entry bodies fetched from external sources."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable

from depwatch.changelog.transform import Entry

_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


class Sanitizer:
    """Normalises line endings, strips control characters and optionally truncates.

    Tabs and newlines are kept. ``max_runes`` caps the number of characters
    kept per body; zero or less means no cap.
    """

    def __init__(self, max_runes: int = 0) -> None:
        self.max_runes = max_runes if max_runes > 0 else 0

    def _clean(self, body: str) -> str:
        body = body.replace("\r\n", "\n").replace("\r", "\n")
        body = _CONTROL.sub("", body)
        if self.max_runes and len(body) > self.max_runes:
            body = body[: self.max_runes]
        return body.strip()

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of the entries with cleaned bodies."""
        return [dataclasses.replace(e, body=self._clean(e.body)) for e in entries]