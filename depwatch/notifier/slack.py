"""Delivery of digest messages to a Slack incoming webhook."""

from __future__ import annotations

import requests

from depwatch.notifier.multi import NotifierError

DEFAULT_TIMEOUT = 10.0


class SlackNotifier:
    """Posts text messages to a Slack webhook URL."""

    def __init__(self, webhook_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        if not webhook_url:
            raise ValueError("slack webhook URL must not be empty")
        self.webhook_url = webhook_url
        self.timeout = timeout

    def send(self, message: str) -> None:
        """Post ``message``; raise :class:`NotifierError` on any failure."""
        try:
            response = requests.post(
                self.webhook_url, json={"text": message}, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise NotifierError(f"slack: request failed: {exc}") from exc
        if not 200 <= response.status_code < 300:
            raise NotifierError(
                f"slack: unexpected status code {response.status_code}: {response.text}"
            )