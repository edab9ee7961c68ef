"""Parsing and comparison of semantic version strings."""

from __future__ import annotations

import re
from dataclasses import dataclass

_NUMBER = re.compile(r"[+-]?[0-9]+")


class VersionError(ValueError):
    """Raised when a version string is not of the form major.minor.patch."""


@dataclass(frozen=True)
class Version:
    """A parsed semantic version with an optional pre-release label."""

    major: int = 0
    minor: int = 0
    patch: int = 0
    pre: str = ""

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        return f"{text}-{self.pre}" if self.pre else text

    def less(self, other: Version) -> bool:
        """Whether this version is older than ``other``, ignoring pre-release labels."""
        return (self.major, self.minor, self.patch) < (other.major, other.minor, other.patch)

    def equal(self, other: Version) -> bool:
        """Whether both versions match, ignoring pre-release labels."""
        return (self.major, self.minor, self.patch) == (other.major, other.minor, other.patch)


def _component(value: str, name: str, text: str) -> int:
    if not _NUMBER.fullmatch(value):
        raise VersionError(f"invalid {name} in {text!r}: {value!r} is not a number")
    return int(value)


def parse_version(text: str) -> Version:
    """Parse strings such as ``v1.2.3`` or ``1.2.3-beta``."""
    if text.startswith("v"):
        text = text[1:]
    core, sep, pre = text.partition("-")
    parts = core.split(".", 2)
    if len(parts) != 3:
        raise VersionError(f"invalid version {core!r}: expected major.minor.patch")
    major = _component(parts[0], "major", core)
    minor = _component(parts[1], "minor", core)
    patch = _component(parts[2], "patch", core)
    return Version(major, minor, patch, pre if sep else "")