"""Benchmark: Logger emit throughput.

Measures the cost of formatting and writing one line through an in-memory
sink, through the stdlib-backed sink, and of a DEBUG call that is filtered
out.  Run explicitly (``pytest tests/benchmarks/bench_logging.py``);
requires ``pytest-benchmark``.
"""

from __future__ import annotations

import io
import logging

from svclog.observability.logging import Logger, LoggingSink
from svclog.testing.fakes import InMemorySink, RecordingTerminator


class _CountingSink:
    def __init__(self) -> None:
        self.count = 0

    def write(self, severity, line) -> None:
        self.count += 1


def _stream_logger() -> logging.Logger:
    logger = logging.getLogger("svclog.bench")
    if not logger.handlers:
        logger.addHandler(logging.StreamHandler(io.StringIO()))
        logger.setLevel(logging.DEBUG)
        logger.propagate = False
    return logger


def test_info_counting_sink(benchmark):
    """``Logger.info`` with printf-style args into a no-op sink."""
    sink = _CountingSink()
    logger = Logger("bench", "ctx", sink=sink)

    benchmark(logger.info, "order %s processed in %d ms", "ord-42", 17)
    assert sink.count > 0


def test_debug_filtered(benchmark):
    """A DEBUG call while debug is disabled does no formatting work."""
    sink = InMemorySink()
    logger = Logger("bench", "ctx", False, sink=sink)

    benchmark(logger.debug, "payload %r", {"k": "v" * 100})
    assert sink.records == []


def test_error_with_capture(benchmark):
    """``Logger.error`` including construction of the captured error."""
    captured: list[BaseException] = []
    logger = Logger(
        "bench", "ctx",
        sink=_CountingSink(),
        capture_exception=captured.append,
        terminate=RecordingTerminator(),
    )

    benchmark(logger.error, "charge failed: %s", "card declined")
    assert captured


def test_info_stdlib_sink(benchmark):
    """``Logger.info`` through :class:`LoggingSink` and a StreamHandler."""
    logger = Logger("bench", "ctx", sink=LoggingSink(_stream_logger()))

    benchmark(logger.info, "order %s processed", "ord-42")
