"""Observability – Logger: leveled console lines, capture hook and webhooks."""
from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from svclog.adapters.http import HttpxWebhookTransport, WebhookTransport
from svclog.kernel.errors import (
    CapturedError,
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)
from svclog.kernel.time import Clock, SystemClock, rfc3339
from svclog.observability.logging.severity import Severity, service_marker
from svclog.observability.logging.sink import LoggingSink, OutputSink
from svclog.observability.logging.terminate import Terminator, exit_process
from svclog.observability.logging.webhook import WebhookConfig, WebhookPayload

if TYPE_CHECKING:
    from svclog.config.settings import LoggerSettings

CaptureFunc = Callable[[BaseException], Any]

FATAL_EXIT_STATUS = 1


class Logger:
    """Leveled logger for one service or subsystem.

    Every call runs to completion on the calling thread: the console line is
    written, the capture callback is invoked and the webhook is POSTed
    before the method returns.  Nothing is queued.

    ``service_name``, ``context_name`` and ``webhook`` are read-only after
    construction and may be shared across threads.  ``debug_enabled`` and
    ``capture_exception`` may be reassigned by the owner, but they are not
    guarded: changing them while other threads are logging is a data race
    the caller has to synchronise.

    Parameters
    ----------
    service_name:
        Identity label rendered as the ``[service]`` prefix of every line.
    context_name:
        Free-form subsystem / request context.  Wrapped into
        :class:`~svclog.kernel.errors.CapturedError` and sent as
        ``logContextName`` in webhook bodies.
    debug_enabled:
        When false, :meth:`debug` calls are dropped before formatting.
    webhook:
        Webhook target and per-severity gates.
    capture_exception:
        Optional callback (e.g. ``sentry_sdk.capture_exception``) invoked on
        :meth:`error` and :meth:`fatal`.  Its own exceptions propagate.
    sink, transport, clock, terminate:
        Collaborators, replaceable in tests.  Defaults: :class:`LoggingSink`
        (stderr), :class:`HttpxWebhookTransport`, :class:`SystemClock` and
        :func:`exit_process`.  The default transport is only built when the
        webhook has a URL, and it is built here so threads logging
        concurrently share one client.
    """

    def __init__(
        self,
        service_name: str,
        context_name: str = "",
        debug_enabled: bool = False,
        webhook: WebhookConfig | None = None,
        *,
        capture_exception: CaptureFunc | None = None,
        sink: OutputSink | None = None,
        transport: WebhookTransport | None = None,
        clock: Clock | None = None,
        terminate: Terminator | None = None,
    ) -> None:
        self._service_name = service_name
        self._context_name = context_name
        self._webhook = webhook or WebhookConfig()
        self.debug_enabled = debug_enabled
        self.capture_exception = capture_exception
        self._sink = sink if sink is not None else LoggingSink()
        if transport is None and self._webhook.enabled:
            transport = HttpxWebhookTransport()
        self._transport = transport
        self._clock = clock or SystemClock()
        self._terminate = terminate or exit_process
        self._prefix = service_marker(service_name)

    @classmethod
    def from_settings(cls, settings: LoggerSettings, **collaborators: Any) -> "Logger":
        """Build a logger from loaded :class:`~svclog.config.settings.LoggerSettings`."""
        return cls(
            settings.service_name,
            settings.context_name,
            settings.debug,
            settings.webhook_config(),
            **collaborators,
        )

    def __repr__(self) -> str:
        return (
            f"Logger(service_name={self._service_name!r}, context_name={self._context_name!r}, "
            f"debug_enabled={self.debug_enabled!r})"
        )

    @property
    def service_name(self) -> str:
        return self._service_name

    @property
    def context_name(self) -> str:
        return self._context_name

    @property
    def webhook(self) -> WebhookConfig:
        return self._webhook

    # ------------------------------------------------------------------
    # Core emit routine
    # ------------------------------------------------------------------

    def log(self, severity: Severity, msg: str, *args: Any) -> None:
        """Format ``msg % args`` and write one line at *severity*.

        DEBUG lines are dropped without formatting while ``debug_enabled`` is
        false.  A template/argument mismatch raises like ``msg % args`` does.
        """
        if severity is Severity.DEBUG and not self.debug_enabled:
            return
        self._emit(severity, _render(msg, args))

    def _emit(self, severity: Severity, message: str) -> None:
        self._sink.write(severity, f"{self._prefix}{severity.marker}{message}")

    # ------------------------------------------------------------------
    # Per-severity policy
    # ------------------------------------------------------------------

    def info(self, msg: str, *args: Any) -> None:
        self.log(Severity.INFO, msg, *args)

    def debug(self, msg: str, *args: Any) -> None:
        self.log(Severity.DEBUG, msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        """Log at WARN, then POST to the webhook when ``send_warn`` is set."""
        message = _render(msg, args)
        self._emit(Severity.WARN, message)
        if self._webhook.send_warn:
            self._send_webhook(Severity.WARN, message)

    def error(self, msg: str, *args: Any) -> None:
        """Capture, log at ERR, then POST to the webhook when ``send_error`` is set."""
        message = _render(msg, args)
        self._capture(message)
        self._emit(Severity.ERR, message)
        if self._webhook.send_error:
            self._send_webhook(Severity.ERR, message)

    def fatal(self, msg: str, *args: Any) -> None:
        """Like :meth:`error` (gated by ``send_fatal``), then end the process.

        The webhook POST finishes before termination, so a slow endpoint
        delays the exit.
        """
        message = _render(msg, args)
        self._capture(message)
        self._emit(Severity.ERR, message)
        if self._webhook.send_fatal:
            self._send_webhook(Severity.ERR, message)
        self._terminate(FATAL_EXIT_STATUS)

    def _capture(self, message: str) -> None:
        capture = self.capture_exception
        if capture is not None:
            capture(CapturedError(self._context_name, message))

    # ------------------------------------------------------------------
    # Webhook delivery
    # ------------------------------------------------------------------

    def _send_webhook(self, severity: Severity, message: str) -> None:
        """Single best-effort POST; failures become ERR lines, never webhooks."""
        if not self._webhook.enabled:
            return

        payload = WebhookPayload(
            service_name=self._service_name,
            context_name=self._context_name,
            message=message,
            level=severity.value,
            timestamp=rfc3339(self._clock.now()),
        )
        try:
            body = payload.to_json()
        except SerializationError as exc:
            self.log(Severity.ERR, "Failed to marshal webhook payload: %s", exc.message)
            return

        assert self._transport is not None
        try:
            self._transport.post_json(self._webhook.url, body)
        except ExternalServiceError as exc:
            if exc.status_code is None:
                self.log(Severity.ERR, "Failed to send webhook: %s", exc.message)
            else:
                self.log(Severity.ERR, "Webhook responded with status: %s", exc.message)
        except InfrastructureError as exc:
            self.log(Severity.ERR, "Failed to send webhook: %s", exc.message)


def _render(msg: str, args: tuple[Any, ...]) -> str:
    return msg % args if args else msg


__all__ = ["CaptureFunc", "FATAL_EXIT_STATUS", "Logger"]
