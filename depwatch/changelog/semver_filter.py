"""Pipeline stage keeping entries whose version lies in an inclusive range."""

from __future__ import annotations

from collections.abc import Iterable

from depwatch.changelog.transform import Entry
from depwatch.changelog.version import Version, VersionError, parse_version


def _parse_bound(text: str | None) -> Version | None:
    if text is None:
        return None
    try:
        return parse_version(text)
    except VersionError:
        return None


class SemVerFilter:
    """Keeps entries whose version falls within ``[min_version, max_version]``.

    Either bound may be omitted; a bound that does not parse is ignored.
    Entries whose own version does not parse are always kept.
    """

    def __init__(self, min_version: str | None = None, max_version: str | None = None) -> None:
        self.minimum = _parse_bound(min_version)
        self.maximum = _parse_bound(max_version)

    def _in_range(self, version: Version) -> bool:
        if self.minimum is not None and version.less(self.minimum):
            return False
        if self.maximum is not None and self.maximum.less(version):
            return False
        return True

    def apply(self, entries: Iterable[Entry] | None) -> list[Entry]:
        out = []
        for entry in entries or ():
            try:
                version = parse_version(entry.version)
            except VersionError:
                out.append(entry)
                continue
            if self._in_range(version):
                out.append(entry)
        return out

    def __str__(self) -> str:
        low = str(self.minimum) if self.minimum is not None else "*"
        high = str(self.maximum) if self.maximum is not None else "*"
        return f"SemVerFilter[{low}, {high}]"