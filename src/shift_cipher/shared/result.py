"""Result metrics shared by the transformer and the CLI summary."""

from dataclasses import dataclass


@dataclass
class PerformanceMetrics:
    """Performance metrics for one cipher run."""

    processing_time_ms: float = 0.0
    memory_start_bytes: int = 0
    memory_end_bytes: int = 0
    bytes_processed: int = 0
    lines_processed: int = 0

    @property
    def bytes_per_second(self) -> float:
        """Calculate bytes processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.bytes_processed * 1000.0) / self.processing_time_ms

    @property
    def memory_delta_bytes(self) -> int:
        """Resident memory change over the run."""
        return self.memory_end_bytes - self.memory_start_bytes

    @property
    def resident_memory_mb(self) -> float:
        """Resident memory at the end of the run in megabytes."""
        return self.memory_end_bytes / (1024 * 1024)
