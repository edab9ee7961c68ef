"""Declarations of where a dependency's changelog comes from."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SourceType(str, Enum):
    """Kind of changelog source."""

    HTTP = "http"
    GITHUB = "github"


class SourceError(ValueError):
    """Base class for misconfigured sources."""


class MissingNameError(SourceError):
    """The source has no name."""

    def __init__(self) -> None:
        super().__init__("source: name is required")


class MissingURLError(SourceError):
    """An HTTP source has no URL."""

    def __init__(self) -> None:
        super().__init__("source: url is required for http sources")


class MissingOwnerError(SourceError):
    """A GitHub source has no owner."""

    def __init__(self) -> None:
        super().__init__("source: owner is required for github sources")


class MissingRepoError(SourceError):
    """A GitHub source has no repository."""

    def __init__(self) -> None:
        super().__init__("source: repo is required for github sources")


class UnknownSourceTypeError(SourceError):
    """The source type is not one of the known kinds."""

    def __init__(self, source_type: str) -> None:
        super().__init__(f"source: unknown source type {source_type!r}")


def _type_text(value: SourceType | str) -> str:
    return value.value if isinstance(value, SourceType) else str(value)


@dataclass
class Source:
    """A dependency changelog source as declared in the configuration."""

    name: str = ""
    type: SourceType | str = ""
    url: str = ""
    owner: str = ""
    repo: str = ""

    def _known_type(self) -> SourceType | None:
        try:
            return SourceType(_type_text(self.type))
        except ValueError:
            return None

    def validate(self) -> None:
        """Raise a :class:`SourceError` subclass when the source is misconfigured."""
        if not self.name:
            raise MissingNameError()
        kind = self._known_type()
        if kind is SourceType.HTTP:
            if not self.url:
                raise MissingURLError()
        elif kind is SourceType.GITHUB:
            if not self.owner:
                raise MissingOwnerError()
            if not self.repo:
                raise MissingRepoError()
        else:
            raise UnknownSourceTypeError(_type_text(self.type))

    def __str__(self) -> str:
        kind = self._known_type()
        prefix = _type_text(self.type)
        if kind is SourceType.GITHUB:
            return f"{prefix}:{self.owner}/{self.repo}"
        if kind is SourceType.HTTP:
            return f"{prefix}:{self.url}"
        return f"{prefix}:{self.name}"