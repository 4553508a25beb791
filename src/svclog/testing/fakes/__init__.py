"""Testing fakes – in-memory doubles for Logger collaborators."""
from svclog.testing.fakes.clock import PINNED_AT, FakeClock
from svclog.testing.fakes.sink import InMemorySink
from svclog.testing.fakes.terminate import RecordingTerminator

__all__ = [
    "PINNED_AT",
    "FakeClock",
    "InMemorySink",
    "RecordingTerminator",
]
