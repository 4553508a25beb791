"""Observability – Severity levels and their console markers."""
from __future__ import annotations

import logging
from enum import Enum

_RESET = "\033[0m"


class Severity(str, Enum):
    """Closed set of log levels.  ``value`` is the webhook ``level`` label."""

    INFO = "INFO"
    WARN = "WARN"
    ERR = "ERR"
    DEBUG = "DEBUG"

    @property
    def marker(self) -> str:
        """ANSI-decorated tag written before the message, trailing space included."""
        return _MARKERS[self]

    @property
    def stdlib_level(self) -> int:
        return _STDLIB_LEVELS[self]


_MARKERS: dict[Severity, str] = {
    Severity.INFO: f"\033[44m[INFO]{_RESET} ",
    Severity.WARN: f"\033[43m[WARN]{_RESET} ",
    Severity.ERR: f"\033[41m[ERR]{_RESET} ",
    Severity.DEBUG: f"\033[40m\033[37m[DEBUG]{_RESET} ",
}

_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERR: logging.ERROR,
    Severity.DEBUG: logging.DEBUG,
}


def service_marker(service_name: str) -> str:
    """Magenta ``[service]`` tag that prefixes every line."""
    return f"\033[35m[{service_name}]{_RESET} "


__all__ = ["Severity", "service_marker"]
