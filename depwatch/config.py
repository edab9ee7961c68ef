"""Loading and validation of the YAML configuration file."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CHECK_INTERVAL = timedelta(hours=24)

_UNIT_NANOSECONDS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,
    "μs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60_000_000_000,
    "h": 3_600_000_000_000,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


class ConfigError(ValueError):
    """Raised when the configuration cannot be read, parsed or validated."""


@dataclass
class Dependency:
    """A single dependency to watch."""

    name: str = ""
    ecosystem: str = ""
    version: str = ""


@dataclass
class SlackConfig:
    """Slack webhook settings."""

    webhook_url: str = ""
    channel: str = ""


@dataclass
class EmailConfig:
    """SMTP settings for e-mail notifications."""

    smtp_host: str = ""
    smtp_port: int = 0
    from_addr: str = ""
    to: list[str] = field(default_factory=list)
    password: str = ""


@dataclass
class Notifiers:
    """Settings for the supported notification channels."""

    slack: SlackConfig = field(default_factory=SlackConfig)
    email: EmailConfig = field(default_factory=EmailConfig)


@dataclass
class Config:
    """Top-level configuration."""

    check_interval: timedelta = timedelta(0)
    dependencies: list[Dependency] = field(default_factory=list)
    notifiers: Notifiers = field(default_factory=Notifiers)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as ``12h``, ``1h30m`` or ``-1.5s``."""
    rest = text
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ConfigError(f"invalid duration {text!r}")
    total = 0.0
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        if match is None:
            raise ConfigError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _UNIT_NANOSECONDS[match.group(2)]
        pos = match.end()
    return timedelta(microseconds=sign * total / 1_000)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"parsing yaml: {where} must be a mapping")
    return value


def _interval(value: Any) -> timedelta:
    if value is None:
        return timedelta(0)
    if isinstance(value, bool):
        raise ConfigError("parsing yaml: check_interval must be a duration")
    if isinstance(value, int):
        return timedelta(microseconds=value / 1_000)
    return parse_duration(str(value))


def _dependencies(value: Any) -> list[Dependency]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("parsing yaml: dependencies must be a list")
    deps = []
    for index, item in enumerate(value):
        raw = _mapping(item, f"dependency[{index}]")
        deps.append(
            Dependency(
                name=_text(raw.get("name")),
                ecosystem=_text(raw.get("ecosystem")),
                version=_text(raw.get("version")),
            )
        )
    return deps


def _notifiers(value: Any) -> Notifiers:
    raw = _mapping(value, "notifiers")
    slack = _mapping(raw.get("slack"), "notifiers.slack")
    email = _mapping(raw.get("email"), "notifiers.email")
    recipients = email.get("to") or []
    if not isinstance(recipients, list):
        raise ConfigError("parsing yaml: notifiers.email.to must be a list")
    try:
        port = int(email.get("smtp_port") or 0)
    except (TypeError, ValueError) as exc:
        raise ConfigError("parsing yaml: notifiers.email.smtp_port must be an integer") from exc
    return Notifiers(
        slack=SlackConfig(
            webhook_url=_text(slack.get("webhook_url")),
            channel=_text(slack.get("channel")),
        ),
        email=EmailConfig(
            smtp_host=_text(email.get("smtp_host")),
            smtp_port=port,
            from_addr=_text(email.get("from")),
            to=[_text(r) for r in recipients],
            password=_text(email.get("password")),
        ),
    )


def _validate(config: Config) -> None:
    if not config.dependencies:
        raise ConfigError("validation failed: at least one dependency must be specified")
    for index, dep in enumerate(config.dependencies):
        if not dep.name:
            raise ConfigError(f"validation failed: dependency[{index}]: name is required")
        if not dep.ecosystem:
            raise ConfigError(
                f"validation failed: dependency[{index}] {dep.name!r}: ecosystem is required"
            )


def load(path: str | Path) -> Config:
    """Read, parse and validate the YAML configuration at ``path``."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"reading file {str(path)!r}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"parsing yaml: {exc}") from exc

    raw = _mapping(data, "document")
    config = Config(
        check_interval=_interval(raw.get("check_interval")),
        dependencies=_dependencies(raw.get("dependencies")),
        notifiers=_notifiers(raw.get("notifiers")),
    )
    _validate(config)
    if config.check_interval == timedelta(0):
        config.check_interval = DEFAULT_CHECK_INTERVAL
    return config