"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── CapturedError        (captured.py)
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        ├── SerializationError
        └── ExternalServiceError
"""

from svclog.kernel.errors.application import ApplicationError
from svclog.kernel.errors.base import BaseError
from svclog.kernel.errors.captured import CapturedError
from svclog.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    SerializationError,
)
from svclog.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "CapturedError",
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "SerializationError",
]
