"""Testing fakes – FakeClock."""
from __future__ import annotations

from datetime import UTC, datetime

from svclog.kernel.time import FrozenClock, rfc3339

PINNED_AT = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock(FrozenClock):
    """FrozenClock that starts at :data:`PINNED_AT` unless told otherwise."""

    def __init__(self, start: datetime = PINNED_AT) -> None:
        super().__init__(start)

    def stamp(self) -> str:
        """The ``timestamp`` a webhook body would carry right now."""
        return rfc3339(self.now())


__all__ = ["FakeClock", "PINNED_AT"]
