"""Delivery of digest notifications to several back-ends at once."""

from __future__ import annotations

from abc import ABC, abstractmethod


class NotifierError(Exception):
    """Raised when a notification could not be delivered.

    ``errors`` holds the underlying failures when several notifiers failed.
    """

    def __init__(self, message: str, errors: list[BaseException] | None = None) -> None:
        super().__init__(message)
        self.errors: list[BaseException] = list(errors or ())


class Notifier(ABC):
    """A back-end that delivers a digest message."""

    @abstractmethod
    def send(self, subject: str, body: str) -> None:
        """Deliver ``body`` under ``subject``; raise on failure."""


class MultiNotifier(Notifier):
    """Fans a single send out to several notifiers.

    Every notifier is attempted; failures are collected and raised together.
    """

    def __init__(self, *notifiers: Notifier) -> None:
        if not notifiers:
            raise ValueError("multinotifier: at least one notifier is required")
        self.notifiers: tuple[Notifier, ...] = notifiers

    def send(self, subject: str, body: str) -> None:
        errors: list[BaseException] = []
        for notifier in self.notifiers:
            try:
                notifier.send(subject, body)
            except Exception as exc:  # noqa: BLE001 - every failure is collected
                errors.append(exc)
        if errors:
            details = "; ".join(str(err) for err in errors)
            raise NotifierError(
                f"multinotifier: {len(errors)} notifier(s) failed: {details}", errors
            )