"""Unit tests for svclog.testing.fakes."""
from __future__ import annotations

from datetime import UTC, datetime

from svclog.kernel.time import FrozenClock
from svclog.observability.logging import Severity
from svclog.testing.fakes import PINNED_AT, FakeClock, InMemorySink, RecordingTerminator


class TestFakeClock:
    def test_pinned_time(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_each_call_is_independent(self) -> None:
        first = FakeClock()
        first.advance(hours=1)
        assert FakeClock().now().hour == 12

    def test_custom_start(self) -> None:
        start = datetime(2030, 5, 6, 7, 8, 9, tzinfo=UTC)
        assert FakeClock(start).now() == start
        assert FakeClock().now() == PINNED_AT

    def test_stamp_follows_advance(self) -> None:
        clock = FakeClock()
        assert clock.stamp() == "2026-01-01T12:00:00Z"
        clock.advance(seconds=90)
        assert clock.stamp() == "2026-01-01T12:01:30Z"


class TestInMemorySink:
    def test_records_in_order(self) -> None:
        sink = InMemorySink()
        sink.write(Severity.INFO, "a")
        sink.write(Severity.ERR, "b")
        assert sink.records == [(Severity.INFO, "a"), (Severity.ERR, "b")]
        assert sink.lines == ["a", "b"]

    def test_filter_by_severity(self) -> None:
        sink = InMemorySink()
        sink.write(Severity.WARN, "w")
        sink.write(Severity.ERR, "e")
        assert sink.at(Severity.ERR) == ["e"]
        assert sink.at(Severity.DEBUG) == []

    def test_clear(self) -> None:
        sink = InMemorySink()
        sink.write(Severity.INFO, "a")
        sink.clear()
        assert sink.records == []


class TestRecordingTerminator:
    def test_records_statuses(self) -> None:
        terminate = RecordingTerminator()
        assert terminate.called is False
        terminate(1)
        assert terminate.statuses == [1]
        assert terminate.called is True
