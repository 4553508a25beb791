"""Kernel time – Clock port + implementations."""
from svclog.kernel.time.clock import Clock, FrozenClock, SystemClock, rfc3339

__all__ = ["Clock", "FrozenClock", "SystemClock", "rfc3339"]
