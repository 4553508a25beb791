"""CapturedError — the value handed to exception-capture callbacks."""

from __future__ import annotations

from svclog.kernel.errors.base import BaseError


class CapturedError(BaseError):
    """An error-level log event wrapped with the logger's context name.

    The context label and the formatted message stay separate attributes so
    exception trackers can group on either; ``str()`` joins them as
    ``"{context} => message"``.
    """

    default_code = "captured_error"

    def __init__(self, context_name: str, message: str) -> None:
        super().__init__(message, detail={"context": context_name})
        self.context_name = context_name

    def __str__(self) -> str:
        return f"{{{self.context_name}}} => {self.message}"

    def __repr__(self) -> str:
        return f"CapturedError(context_name={self.context_name!r}, message={self.message!r})"


__all__ = ["CapturedError"]
