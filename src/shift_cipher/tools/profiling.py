"""Run profiling for the shift cipher.

Records wall time and resident memory around a block of work so the
diagnostic summary can report how long a run took and how much memory it
held.
"""

import time
from types import TracebackType
from typing import Optional, Type

import psutil

from ..shared.result import PerformanceMetrics


class RunProfiler:
    """Context manager measuring elapsed time and resident memory.

    Examples:
        >>> with RunProfiler() as profiler:
        ...     transform()
        >>> profiler.metrics(bytes_processed=1024).processing_time_ms
    """

    def __init__(self, enable_memory_tracking: bool = True) -> None:
        self.enable_memory_tracking = enable_memory_tracking
        self._process = psutil.Process() if enable_memory_tracking else None
        self.start_time = 0.0
        self.end_time = 0.0
        self.memory_start = 0
        self.memory_end = 0

    def _resident_memory(self) -> int:
        if self._process is None:
            return 0
        return self._process.memory_info().rss

    def __enter__(self) -> "RunProfiler":
        self.memory_start = self._resident_memory()
        self.start_time = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.end_time = time.perf_counter()
        self.memory_end = self._resident_memory()

    @property
    def duration_ms(self) -> float:
        """Processing duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000

    def metrics(
        self, bytes_processed: int = 0, lines_processed: int = 0
    ) -> PerformanceMetrics:
        """Package the measurements as PerformanceMetrics."""
        return PerformanceMetrics(
            processing_time_ms=self.duration_ms,
            memory_start_bytes=self.memory_start,
            memory_end_bytes=self.memory_end,
            bytes_processed=bytes_processed,
            lines_processed=lines_processed,
        )
