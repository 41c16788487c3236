"""catlexer ScanAccumulator: opt-in profiling for tokenization.

This module provides accumulated metrics during scanning:
- Total scan time
- Source length
- Token count

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from catlexer import tokenize
    from catlexer.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = list(tokenize("<head><title>x</title></head>"))

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 29, "token_count": 4, ...}

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Number of non-terminal tokens produced.
        scan_calls: Number of completed tokenize() sessions.
        illegal_count: Sessions that ended in ILLEGAL.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    scan_calls: int = 0
    illegal_count: int = 0

    def record_scan(self, source_length: int, token_count: int, *, illegal: bool = False) -> None:
        """Record a finished tokenize() session.

        Args:
            source_length: Length of the source string scanned.
            token_count: Number of non-terminal tokens it produced.
            illegal: Whether the session ended in ILLEGAL.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        if illegal:
            self.illegal_count += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, source_length, token_count, scan_calls,
            illegal_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "scan_calls": self.scan_calls,
            "illegal_count": self.illegal_count,
        }


# Module-level ContextVar
_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by tokenize() calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
