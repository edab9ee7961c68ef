"""Delivery of digest notifications by SMTP e-mail."""

from __future__ import annotations

import smtplib
import ssl
from collections.abc import Iterable
from email.message import EmailMessage

from depwatch.notifier.multi import Notifier, NotifierError

SMTP_TIMEOUT = 30.0


class EmailNotifier(Notifier):
    """Sends digests as plain-text e-mail to every configured recipient.

    Authentication is used only when a username is given.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_addr: str,
        to: Iterable[str],
    ) -> None:
        recipients = list(to or ())
        if not host:
            raise ValueError("email notifier: host must not be empty")
        if not from_addr:
            raise ValueError("email notifier: from address must not be empty")
        if not recipients:
            raise ValueError("email notifier: at least one recipient required")
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_addr = from_addr
        self.to = recipients

    def _message(self, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.from_addr
        msg["To"] = self.to[0]
        msg["Subject"] = subject
        msg.set_content(body, charset="utf-8")
        return msg

    def send(self, subject: str, body: str) -> None:
        message = self._message(subject, body)
        try:
            with smtplib.SMTP(self.host, self.port, timeout=SMTP_TIMEOUT) as smtp:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls(context=ssl.create_default_context())
                    smtp.ehlo()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(message, from_addr=self.from_addr, to_addrs=self.to)
        except OSError as exc:
            raise NotifierError(f"email notifier: send failed: {exc}") from exc