"""Delivery errors raised by webhook transports and payload encoding.

The logger catches :class:`InfrastructureError` around every webhook POST
and turns it into one ERR console line, so each subclass's ``message`` is
written to read well after ``"Failed to send webhook: "``.
"""

from __future__ import annotations

from typing import Any

from svclog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A webhook could not be encoded or delivered."""

    default_code = "delivery_failed"


class ConnectionError(InfrastructureError):  # noqa: A001
    """The webhook host refused or never answered the TCP connection."""

    default_code = "webhook_unreachable"

    def __init__(self, url: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not connect to '{url}'", **kwargs)
        self.resource = url


class TimeoutError(InfrastructureError):  # noqa: A001
    """Connecting, writing or waiting for the response status ran out of time."""

    default_code = "webhook_timeout"


class SerializationError(InfrastructureError):
    """A payload could not be rendered as JSON; nothing was sent."""

    default_code = "payload_not_serializable"

    def __init__(self, message: str, *, payload_type: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """The webhook endpoint misbehaved.

    ``status_code`` is set when the endpoint answered with anything other
    than ``200``; it is ``None`` for protocol-level failures where no status
    line was received.
    """

    default_code = "webhook_rejected"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Webhook endpoint '{service}' failed", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
    "TimeoutError",
]
