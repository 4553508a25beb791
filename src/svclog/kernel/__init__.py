"""Kernel – framework-agnostic building blocks (errors, time)."""

from svclog.kernel.errors import (
    ApplicationError,
    BaseError,
    CapturedError,
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CapturedError",
    "ExternalServiceError",
    "InfrastructureError",
    "SerializationError",
]
