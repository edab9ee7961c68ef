"""Flagging of entries published longer ago than a threshold."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from depwatch.changelog.transform import Entry

STALE_TAG = "stale"


class Staler:
    """Adds a ``stale`` tag to entries dated before now minus ``threshold``.

    A zero or negative threshold disables the check. Entries without a date
    are left untouched. Naive dates are compared with local time.
    """

    def __init__(self, threshold: timedelta) -> None:
        self.threshold = threshold

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        entries = list(entries)
        if self.threshold <= timedelta(0):
            return entries
        aware_cutoff = datetime.now(timezone.utc) - self.threshold
        naive_cutoff = datetime.now() - self.threshold
        out = []
        for entry in entries:
            date = entry.date
            if date is not None:
                cutoff = naive_cutoff if date.tzinfo is None else aware_cutoff
                if date < cutoff and STALE_TAG not in entry.tags:
                    entry = dataclasses.replace(entry, tags=[*entry.tags, STALE_TAG])
            out.append(entry)
        return out