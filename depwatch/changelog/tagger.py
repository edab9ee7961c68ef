"""Free-form keyword-driven tagging of changelog entries."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping

from depwatch.changelog.transform import Entry


class Tagger:
    """Adds tags to entries whose body or version contains a rule's keyword.

    Tags and keywords are matched case-insensitively. Existing tags are kept
    and a tag already present is not added again.
    """

    def __init__(self, rules: Mapping[str, Iterable[str]] | None = None) -> None:
        self.rules: dict[str, list[str]] = {}
        for tag, keywords in (rules or {}).items():
            self.add_rule(tag, *keywords)

    def add_rule(self, tag: str, *keywords: str) -> None:
        """Register ``tag`` to be applied when any of ``keywords`` appears."""
        self.rules.setdefault(tag.lower(), []).extend(k.lower() for k in keywords)

    def _tags_for(self, entry: Entry) -> list[str]:
        haystack = f"{entry.body} {entry.version}".lower()
        existing = {t.lower() for t in entry.tags}
        added = []
        for tag, keywords in self.rules.items():
            if tag in existing:
                continue
            if any(kw in haystack for kw in keywords):
                added.append(tag)
        return added

    def apply(self, entries: Iterable[Entry]) -> list[Entry]:
        """Return copies of the entries with matching tags appended."""
        return [dataclasses.replace(e, tags=[*e.tags, *self._tags_for(e)]) for e in entries]