"""A fixed-interval job scheduler.

The job runs once at start and then at every interval until stopped.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import timedelta

Job = Callable[[threading.Event], object]


class Scheduler:
    """Runs a job repeatedly at a fixed interval.

    ``interval`` is in seconds or a ``timedelta`` and must be positive. The
    job receives the stop event; errors it raises are logged, not fatal.
    """

    def __init__(
        self,
        interval: float | timedelta,
        job: Job,
        logger: logging.Logger | None = None,
    ) -> None:
        if isinstance(interval, timedelta):
            interval = interval.total_seconds()
        if interval <= 0:
            raise ValueError(f"scheduler: interval must be positive, got {interval}s")
        if job is None:
            raise ValueError("scheduler: job must not be nil")
        self.interval = float(interval)
        self.job = job
        self.logger = logger or logging.getLogger(__name__)

    def _run_job(self, stop: threading.Event) -> None:
        try:
            self.job(stop)
        except Exception as exc:  # noqa: BLE001 - a failing job must not stop the loop
            self.logger.error("scheduler: job error: %s", exc)

    def run(self, stop: threading.Event) -> None:
        """Run the job now and then every interval; return once ``stop`` is set."""
        self.logger.info("scheduler: starting with interval %ss", self.interval)
        self._run_job(stop)
        next_tick = time.monotonic() + self.interval
        while not stop.wait(max(0.0, next_tick - time.monotonic())):
            self._run_job(stop)
            now = time.monotonic()
            next_tick += self.interval
            if next_tick <= now:
                # Drop ticks missed while the job was running.
                missed = int((now - next_tick) // self.interval) + 1
                next_tick += missed * self.interval
        self.logger.info("scheduler: stop requested, stopping")