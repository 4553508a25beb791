"""Observability – output sinks for formatted log lines."""
from __future__ import annotations

import logging
import sys
from typing import Protocol

from svclog.observability.logging.severity import Severity

DEFAULT_LOGGER_NAME = "svclog"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


class OutputSink(Protocol):
    """Port: line-oriented writer.  Each call is one independent record."""

    def write(self, severity: Severity, line: str) -> None: ...


def _default_logger() -> logging.Logger:
    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        # Level gating is done by svclog.Logger; root filters must not drop lines.
        logger.propagate = False
    return logger


class LoggingSink:
    """Write each line through a stdlib :class:`logging.Logger`.

    Parameters
    ----------
    logger:
        Target logger.  Defaults to the ``svclog`` logger, configured on
        first use with a stderr :class:`logging.StreamHandler` prefixing a
        ``YYYY/MM/DD HH:MM:SS`` timestamp.

    The severity is forwarded as the matching stdlib level so downstream
    handlers can still route on it.  Failures inside the logging machinery
    are swallowed; writing a log line never fails the caller.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else _default_logger()

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def write(self, severity: Severity, line: str) -> None:
        try:
            self._logger.log(severity.stdlib_level, "%s", line)
        except Exception:  # noqa: BLE001
            pass


__all__ = ["DATE_FORMAT", "DEFAULT_LOGGER_NAME", "LoggingSink", "OutputSink"]
