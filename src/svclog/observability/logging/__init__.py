"""Observability – leveled logger, output sinks and webhook types."""
from svclog.kernel.errors import CapturedError
from svclog.observability.logging.logger import FATAL_EXIT_STATUS, CaptureFunc, Logger
from svclog.observability.logging.severity import Severity, service_marker
from svclog.observability.logging.sink import LoggingSink, OutputSink
from svclog.observability.logging.terminate import Terminator, exit_process
from svclog.observability.logging.webhook import WebhookConfig, WebhookPayload

__all__ = [
    "CaptureFunc",
    "CapturedError",
    "FATAL_EXIT_STATUS",
    "Logger",
    "LoggingSink",
    "OutputSink",
    "Severity",
    "Terminator",
    "WebhookConfig",
    "WebhookPayload",
    "exit_process",
    "service_marker",
]
