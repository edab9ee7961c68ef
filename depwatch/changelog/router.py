"""Dispatch of entries to named channels by label."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.changelog.transform import Entry

DEFAULT_CHANNEL = "default"


class Router:
    """Routes entries to channels according to ``(label, channel)`` rules.

    An entry matching several rules goes to every matching channel; one
    matching none goes to the fallback channel.
    """

    def __init__(
        self,
        rules: Iterable[tuple[str, str]] | None = None,
        fallback: str = DEFAULT_CHANNEL,
    ) -> None:
        self.rules: list[tuple[str, str]] = list(rules or ())
        self.fallback = fallback

    def route(self, entries: Iterable[Entry]) -> dict[str, list[Entry]]:
        """Map channel names to the entries routed there."""
        out: dict[str, list[Entry]] = {}
        for entry in entries:
            matched = False
            for label, channel in self.rules:
                if label in entry.labels:
                    out.setdefault(channel, []).append(entry)
                    matched = True
            if not matched:
                out.setdefault(self.fallback, []).append(entry)
        return out