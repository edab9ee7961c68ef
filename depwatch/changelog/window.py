"""Restriction of entries to a half-open date interval."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from depwatch.changelog.transform import Entry


class InvalidWindowError(ValueError):
    """Raised when a window's start is not before its end."""

    def __init__(self) -> None:
        super().__init__("window start must be before end")


@dataclass(frozen=True)
class Window:
    """Keeps entries dated within ``[start, end)``; a ``None`` bound is open.

    Entries without a date count as older than any start bound.
    """

    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and not self.start < self.end:
            raise InvalidWindowError()

    def _contains(self, date: datetime | None) -> bool:
        if self.start is not None and (date is None or date < self.start):
            return False
        if self.end is not None and date is not None and date >= self.end:
            return False
        return True

    def apply(self, entries: Iterable[Entry] | None) -> list[Entry]:
        return [entry for entry in entries or () if self._contains(entry.date)]

    def is_zero(self) -> bool:
        """Whether both bounds are unset."""
        return self.start is None and self.end is None