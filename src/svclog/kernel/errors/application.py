"""Application-layer errors — misuse or misconfiguration by the caller."""

from __future__ import annotations

from svclog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
