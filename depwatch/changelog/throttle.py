"""Rate limiting of fetches per dependency key."""

from __future__ import annotations

import threading
import time
from datetime import timedelta

DEFAULT_MIN_DELAY = 60.0


class Throttle:
    """Enforces a minimum delay between successive allowed calls per key.

    ``min_delay`` is in seconds or a ``timedelta``; zero or less means one minute.
    """

    def __init__(self, min_delay: float | timedelta = DEFAULT_MIN_DELAY) -> None:
        if isinstance(min_delay, timedelta):
            min_delay = min_delay.total_seconds()
        self.min_delay = float(min_delay) if min_delay > 0 else DEFAULT_MIN_DELAY
        self._lock = threading.Lock()
        self._last_seen: dict[str, float] = {}

    def allow(self, key: str) -> bool:
        """Whether a fetch for ``key`` is permitted now; records it if so."""
        now = time.monotonic()
        with self._lock:
            last = self._last_seen.get(key)
            if last is not None and now - last < self.min_delay:
                return False
            self._last_seen[key] = now
            return True

    def reset(self, key: str) -> None:
        """Forget ``key`` so its next fetch is allowed at once."""
        with self._lock:
            self._last_seen.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_seen)