"""Line-by-line stream transformation through a substitution table.

The transformer reads one line at a time, maps every byte that has a table
entry, passes every other byte through unchanged, and writes the line back
with the configured terminator. Only one line is held in memory.
"""

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Optional, Union

from ..shared.config import StreamConfig
from ..shared.errors import (
    InputNotFoundError,
    InputUnavailableError,
    OutputUnavailableError,
)
from ..shared.logging import get_logger
from ..shared.result import PerformanceMetrics
from ..tools.profiling import RunProfiler
from .table import SubstitutionTable

PathLike = Union[str, Path]


@dataclass
class TransformResult:
    """Result of transforming one stream.

    Attributes:
        bytes_processed: Input bytes read, line terminators excluded
        lines_processed: Number of lines read
        bytes_written: Output bytes written, terminators included
        input_path: Input file, when the source was a file
        output_path: Output file, when the destination was a file
        metrics: Timing and memory figures for the run
    """
    bytes_processed: int = 0
    lines_processed: int = 0
    bytes_written: int = 0
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    metrics: PerformanceMetrics = field(default_factory=PerformanceMetrics)


def strip_terminator(line: bytes) -> bytes:
    """Remove a trailing ``\\n`` (and a ``\\r`` just before it)."""
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


class StreamTransformer:
    """Applies a substitution table to byte streams and files."""

    def __init__(
        self,
        table: SubstitutionTable,
        config: Optional[StreamConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the transformer.

        Args:
            table: Substitution table to apply
            config: Stream configuration (line terminator)
            correlation_id: Optional correlation ID for logging
        """
        self.table = table
        self.config = config or StreamConfig()
        self.logger = get_logger(__name__, correlation_id, "stream_transformer")

    def transform_lines(self, lines: Iterable[bytes]) -> Iterator[bytes]:
        """Yield each line transformed, with its terminator normalized."""
        terminator = self.config.terminator_bytes
        for line in lines:
            yield self.table.translate(strip_terminator(line)) + terminator

    def transform_stream(self, reader: BinaryIO, writer: BinaryIO) -> TransformResult:
        """Transform ``reader`` into ``writer`` one line at a time.

        Args:
            reader: Binary stream opened for reading
            writer: Binary stream opened for writing

        Returns:
            TransformResult with byte and line counts
        """
        result = TransformResult()
        terminator_length = len(self.config.terminator_bytes)

        with RunProfiler() as profiler:
            for transformed in self.transform_lines(reader):
                writer.write(transformed)

                # translate() preserves length
                result.bytes_processed += len(transformed) - terminator_length
                result.lines_processed += 1
                result.bytes_written += len(transformed)

        result.metrics = profiler.metrics(
            bytes_processed=result.bytes_processed,
            lines_processed=result.lines_processed,
        )
        self.logger.debug(
            "Stream transformed",
            extra={
                "bytes_processed": result.bytes_processed,
                "lines_processed": result.lines_processed,
            },
        )
        return result

    def transform_file(self, input_path: PathLike, output_path: PathLike) -> TransformResult:
        """Transform a file into another file.

        The input is opened first, so an unreadable input fails before the
        output is created or truncated. Both files are closed on every exit
        path.

        Raises:
            InputNotFoundError: If the input file does not exist
            InputUnavailableError: If the input exists but cannot be opened
            OutputUnavailableError: If the output cannot be opened for writing
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        if not input_path.is_file():
            raise InputNotFoundError(input_path)

        if output_path.exists() and output_path.resolve() == input_path.resolve():
            raise OutputUnavailableError(output_path, "output would overwrite the input file")

        try:
            reader = input_path.open("rb")
        except FileNotFoundError as e:
            raise InputNotFoundError(input_path) from e
        except OSError as e:
            raise InputUnavailableError(input_path, e.strerror) from e

        with reader:
            try:
                writer = output_path.open("wb")
            except OSError as e:
                raise OutputUnavailableError(output_path, e.strerror) from e

            with writer:
                result = self.transform_stream(reader, writer)

        result.input_path = input_path
        result.output_path = output_path
        self.logger.info(
            f"Read {result.bytes_processed} characters from {input_path}",
            extra={"output_path": str(output_path)},
        )
        return result

    def transform_bytes(self, data: bytes) -> bytes:
        """Transform an in-memory buffer line by line."""
        return b"".join(self.transform_lines(io.BytesIO(data)))
