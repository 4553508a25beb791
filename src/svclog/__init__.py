"""
svclog – leveled service logging with webhook notifications.

Import path convention::

    from svclog import Logger, Severity, WebhookConfig
    from svclog.config.settings import LoggerSettings, EnvSettingsLoader
    from svclog.testing.fakes import InMemorySink, RecordingTerminator
"""

__version__ = "0.1.0"

from svclog.observability.logging import (
    CapturedError,
    Logger,
    LoggingSink,
    OutputSink,
    Severity,
    WebhookConfig,
    WebhookPayload,
)

__all__ = [
    "CapturedError",
    "Logger",
    "LoggingSink",
    "OutputSink",
    "Severity",
    "WebhookConfig",
    "WebhookPayload",
    "__version__",
]
