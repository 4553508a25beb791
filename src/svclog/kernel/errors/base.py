"""BaseError – root of every exception svclog raises or hands out."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Common shape for svclog errors.

    ``message`` is what ends up on the console when the logger reports the
    failure, so ``str()`` returns it unchanged.  ``code`` is a stable slug
    for callers that branch on the kind of failure, and ``to_dict()`` gives
    exception trackers a structured view.

    Args:
        message: Human-readable description, safe to print as a log line.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra structured context.
        cause: Lower-level exception being wrapped; also set as ``__cause__``.
    """

    default_code: str = "svclog_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
