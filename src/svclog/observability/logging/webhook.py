"""Observability – webhook configuration and payload."""
from __future__ import annotations

import dataclasses
import json
from typing import Any

from svclog.kernel.errors import SerializationError


@dataclasses.dataclass(frozen=True)
class WebhookConfig:
    """Where to POST log events and which severities trigger a POST.

    An empty ``url`` disables delivery whatever the ``send_*`` flags say.
    """

    url: str = ""
    send_error: bool = False
    send_fatal: bool = False
    send_warn: bool = False

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebhookConfig":
        """Build from the JSON shape ``{"url", "sendError", "sendFatal", "sendWarn"}``."""
        return cls(
            url=str(data.get("url") or ""),
            send_error=bool(data.get("sendError", False)),
            send_fatal=bool(data.get("sendFatal", False)),
            send_warn=bool(data.get("sendWarn", False)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "sendError": self.send_error,
            "sendFatal": self.send_fatal,
            "sendWarn": self.send_warn,
        }


@dataclasses.dataclass(frozen=True)
class WebhookPayload:
    """Body of one webhook delivery attempt."""

    service_name: str
    context_name: str
    message: str
    level: str
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {
            "serviceName": self.service_name,
            "logContextName": self.context_name,
            "message": self.message,
            "level": self.level,
            "timestamp": self.timestamp,
        }

    def to_json(self) -> bytes:
        """Compact UTF-8 JSON body.

        Raises
        ------
        SerializationError
            When the fields cannot be encoded (e.g. lone surrogates).
        """
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"cannot encode webhook payload: {exc}",
                payload_type=type(self).__name__,
                cause=exc,
            ) from exc


__all__ = ["WebhookConfig", "WebhookPayload"]
