"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from svclog.kernel.time import Clock, FrozenClock, SystemClock, rfc3339


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset() == timedelta(0)

    def test_close_to_wall_clock(self) -> None:
        assert abs((SystemClock().now() - datetime.now(UTC)).total_seconds()) < 1.0


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def test_now_returns_fixed_time(self) -> None:
        clk: Clock = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()

    def test_advance_combined(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(days=1, hours=2, minutes=3)
        assert clk.now() == datetime(2024, 6, 16, 14, 3, 0, tzinfo=UTC)

    def test_multiple_advances_are_cumulative(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(seconds=10)
        clk.advance(seconds=20)
        assert clk.now() == datetime(2024, 6, 15, 12, 0, 30, tzinfo=UTC)


class TestRfc3339:
    def test_utc_uses_z_suffix(self) -> None:
        assert rfc3339(datetime(2026, 1, 1, 12, 0, 5, tzinfo=UTC)) == "2026-01-01T12:00:05Z"

    def test_drops_fractional_seconds(self) -> None:
        assert rfc3339(datetime(2026, 1, 1, 12, 0, 5, 999_999, tzinfo=UTC)) == "2026-01-01T12:00:05Z"

    def test_keeps_non_utc_offset(self) -> None:
        tz = timezone(timedelta(hours=-3))
        assert rfc3339(datetime(2026, 1, 1, 9, 0, 0, tzinfo=tz)) == "2026-01-01T09:00:00-03:00"

    def test_naive_treated_as_utc(self) -> None:
        assert rfc3339(datetime(2026, 1, 1, 12, 0, 0)) == "2026-01-01T12:00:00Z"

    def test_round_trips_through_fromisoformat(self) -> None:
        moment = datetime(2026, 3, 4, 5, 6, 7, tzinfo=UTC)
        assert datetime.fromisoformat(rfc3339(moment)) == moment
