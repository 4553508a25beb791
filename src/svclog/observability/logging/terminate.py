"""Observability – process termination used by ``Logger.fatal``."""
from __future__ import annotations

import os
import sys
from typing import NoReturn, Protocol


class Terminator(Protocol):
    """Port: end the process with the given exit status."""

    def __call__(self, status: int) -> None: ...


def exit_process(status: int) -> NoReturn:
    """Flush the standard streams and end the whole process with *status*.

    Unlike :func:`sys.exit` this cannot be caught and works from any thread.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (AttributeError, OSError, ValueError):
            pass
    os._exit(status)


__all__ = ["Terminator", "exit_process"]
