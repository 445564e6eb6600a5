# src/coordshape/core/utils/benchmarking.py

import time
import logging
from typing import List
from dataclasses import dataclass, field
from statistics import mean

logger = logging.getLogger(__name__)


@dataclass
class Timer:
    """Context manager for timing code blocks."""

    name: str
    start_time: float = field(default=0.0)
    end_time: float = field(default=0.0)

    def __enter__(self) -> "Timer":
        """Start timing when entering context."""
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        """Stop timing when exiting context."""
        self.end_time = time.perf_counter()
        logger.debug("%s took %.3fs", self.name, self.elapsed())

    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.end_time == 0.0:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time


@dataclass
class TimingStats:
    """Per-geometry optimization timings collected during a ranking."""

    name: str
    times: List[float] = field(default_factory=list)

    def add_timing(self, elapsed: float) -> None:
        self.times.append(elapsed)

    @property
    def total_time(self) -> float:
        return sum(self.times)

    @property
    def avg_time(self) -> float:
        return mean(self.times) if self.times else 0.0

    def __str__(self) -> str:
        if not self.times:
            return f"{self.name}: No timing data"
        return (
            f"{self.name}: Total: {self.total_time:.2f}s, Count: {len(self.times)}, "
            f"Avg: {self.avg_time:.3f}s, Max: {max(self.times):.3f}s"
        )
