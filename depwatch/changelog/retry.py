"""Exponential-backoff retries for operations that may fail transiently.

Raise the error returned by :func:`permanent` to stop further attempts.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy; delays are in seconds."""

    max_attempts: int = 3
    base_delay: float = 0.5
    max_delay: float = 10.0


class PermanentError(Exception):
    """Wraps an error to signal that retrying is futile."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"permanent: {cause}")
        self.cause = cause
        self.__cause__ = cause


class RetryCancelledError(Exception):
    """Raised when retrying stops because the cancel event was set."""

    def __init__(self) -> None:
        super().__init__("retry cancelled")


def permanent(err: BaseException | None) -> PermanentError | None:
    """Wrap ``err`` so that :func:`retry` makes no further attempts."""
    if err is None:
        return None
    return PermanentError(err)


def retry(
    fn: Callable[[], T],
    config: RetryConfig | None = None,
    cancel: threading.Event | None = None,
) -> T:
    """Call ``fn`` until it succeeds, backing off exponentially between attempts.

    Returns what ``fn`` returns. The last error is raised when all attempts
    fail; a :class:`PermanentError` is raised at once. Setting ``cancel``
    stops retrying with :class:`RetryCancelledError`.
    """
    config = config or RetryConfig()
    attempts = max(config.max_attempts, 1)
    delay = config.base_delay

    for attempt in range(attempts):
        if cancel is not None and cancel.is_set():
            raise RetryCancelledError()
        try:
            return fn()
        except PermanentError:
            raise
        except Exception as exc:
            if attempt == attempts - 1:
                raise
            if cancel is None:
                time.sleep(delay)
            elif cancel.wait(delay):
                raise RetryCancelledError() from exc
            delay = min(delay * 2, config.max_delay)
    raise AssertionError("unreachable")