"""Config settings – LoggerSettings (``LOG_*`` environment variables)."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
from urllib.parse import urlsplit

from svclog.config.errors import InvalidSettingValueError
from svclog.observability.logging.webhook import WebhookConfig

_MAX_LABEL_LENGTH = 63


@dataclasses.dataclass(frozen=True)
class LoggerSettings:
    """Construction options for :class:`~svclog.Logger`.

    Loaded by :class:`~svclog.config.settings.EnvSettingsLoader` from::

        LOG_SERVICE_NAME, LOG_CONTEXT_NAME, LOG_DEBUG,
        LOG_WEBHOOK_URL, LOG_WEBHOOK_SEND_ERROR,
        LOG_WEBHOOK_SEND_FATAL, LOG_WEBHOOK_SEND_WARN

    Validated on construction, so a bad value fails at startup rather than
    on the first webhook delivery.
    """

    _prefix: ClassVar[str] = "LOG"

    service_name: str
    context_name: str = ""
    debug: bool = False
    webhook_url: str = ""
    webhook_send_error: bool = False
    webhook_send_fatal: bool = False
    webhook_send_warn: bool = False

    def __post_init__(self) -> None:
        if not self.service_name:
            raise InvalidSettingValueError("service_name", self.service_name, "must not be empty")
        if self.webhook_url:
            _check_webhook_url(self.webhook_url)

    def webhook_config(self) -> WebhookConfig:
        return WebhookConfig(
            url=self.webhook_url,
            send_error=self.webhook_send_error,
            send_fatal=self.webhook_send_fatal,
            send_warn=self.webhook_send_warn,
        )


def _check_webhook_url(url: str) -> None:
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise InvalidSettingValueError("webhook_url", url, "must be an absolute http(s) URL")
    host = parts.hostname
    if ":" in host:
        return  # bracketed IPv6 literal
    labels = host[:-1].split(".") if host.endswith(".") else host.split(".")
    if any(not label or len(label) > _MAX_LABEL_LENGTH for label in labels):
        raise InvalidSettingValueError(
            "webhook_url", url, "host labels must be 1 to 63 characters long"
        )


__all__ = ["LoggerSettings"]
