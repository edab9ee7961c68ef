"""Building and plain-text formatting of dependency update digests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

from depwatch.changelog.transform import Entry

EMPTY_DIGEST_TEXT = "No dependency updates found."
_ZERO_TIME = datetime(1, 1, 1)


@dataclass
class DigestEntry:
    """A single dependency update in a digest."""

    dependency: str
    version: str = ""
    date: datetime | None = None
    body: str = ""


@dataclass
class Digest:
    """A collection of dependency updates."""

    generated_at: datetime | None = None
    entries: list[DigestEntry] = field(default_factory=list)

    def format_text(self) -> str:
        """Render the digest as plain text."""
        if not self.entries:
            return EMPTY_DIGEST_TEXT
        generated = self.generated_at or _ZERO_TIME
        lines = [
            f"Dependency Digest — {generated:%Y-%m-%d %H:%M} UTC",
            "=" * 48,
        ]
        for entry in self.entries:
            date = entry.date or _ZERO_TIME
            lines.append(f"[{entry.dependency}] {entry.version} ({date:%Y-%m-%d})")
            if entry.body:
                lines.append(entry.body)
            lines.append("")
        return "\n".join(lines) + "\n"


class Builder:
    """Assembles digests from changelog entries keyed by dependency."""

    def build(self, updates: Mapping[str, Iterable[Entry]]) -> Digest:
        """Create a digest stamped with the current UTC time."""
        digest = Digest(generated_at=datetime.now(timezone.utc))
        for dep, entries in updates.items():
            digest.entries.extend(
                DigestEntry(dependency=dep, version=e.version, date=e.date, body=e.body)
                for e in entries
            )
        return digest