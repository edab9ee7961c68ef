"""Changelog entries and composable transformations over lists of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Entry:
    """A single changelog entry for one dependency release.

    A ``date`` of ``None`` means the release date is unknown.
    """

    dependency: str = ""
    version: str = ""
    date: datetime | None = None
    body: str = ""
    tags: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    score: int = 0


class Transformer(ABC):
    """Something that turns a list of entries into another list of entries."""

    @abstractmethod
    def transform(self, entries: Sequence[Entry]) -> list[Entry]:
        """Return the transformed entries."""


class TransformFunc(Transformer):
    """Adapts a plain callable to the Transformer interface."""

    def __init__(self, func: Callable[[Sequence[Entry]], Sequence[Entry]]) -> None:
        self.func = func

    def transform(self, entries: Sequence[Entry]) -> list[Entry]:
        return list(self.func(entries))


class Chain(Transformer):
    """Applies several transformers in order; an empty chain changes nothing."""

    def __init__(self, *steps: Transformer) -> None:
        self.steps: tuple[Transformer, ...] = steps

    def transform(self, entries: Sequence[Entry]) -> list[Entry]:
        result = list(entries)
        for step in self.steps:
            result = step.transform(result)
        return result


class LimitTransformer(Transformer):
    """Keeps at most ``max_entries`` entries; zero or less means no limit."""

    def __init__(self, max_entries: int) -> None:
        self.max_entries = max(max_entries, 0)

    def transform(self, entries: Sequence[Entry]) -> list[Entry]:
        if self.max_entries == 0:
            return list(entries)
        return list(entries[: self.max_entries])