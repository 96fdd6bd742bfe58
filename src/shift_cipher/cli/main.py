"""Main CLI entry points for the shift-encipher and shift-decipher tools.

Both tools share one option parser and one table builder; they differ only
in the cipher direction, which selects the default output suffix and whether
the table or its inverse is built.
"""

import sys
import uuid
from typing import List, Optional, Sequence, TextIO

from ..character.alphabet import CharacterClass
from ..character.stream import StreamTransformer, TransformResult
from ..character.table import ShiftTableBuilder, SubstitutionTable
from ..shared.config import Direction
from ..shared.errors import CipherError
from ..shared.logging import configure_logging, get_logger
from .options import (
    CipherOptions,
    ParseStatus,
    format_help,
    format_usage,
    parse_command_line,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT

DEFAULT_PROGRAM_NAMES = {
    Direction.ENCIPHER: "shift-encipher",
    Direction.DECIPHER: "shift-decipher",
}

SUMMARY_BORDER = "=" * 32


def _yes_no(flag: bool) -> str:
    return "true" if flag else "false"


def format_summary(
    options: CipherOptions, table: SubstitutionTable, result: TransformResult
) -> str:
    """Render the diagnostic summary printed by ``--show-log``."""
    preview = ", ".join(f"({key},{value})" for key, value in table.preview())
    metrics = result.metrics

    lines: List[str] = [
        SUMMARY_BORDER,
        f"{options.direction.title} program options/control",
        SUMMARY_BORDER,
        f"[Raw] Program name:  {options.program_name}",
        f"[Stripped] Name:     {options.program_name_stripped}",
        f"IFILE:               {options.input_path}",
        f"OFILE:               {result.output_path}",
        f"Default output name: {_yes_no(options.use_default_output_name)}",
        f"Shift amount:        {table.shift_amount}",
        f"[Reduced] Shift:     {table.reduced_shift(CharacterClass.UPPER_ALPHA)}",
        f"Shift numbers:       {_yes_no(options.shift_digits)}",
        f"Number shift amount: {table.reduced_shift(CharacterClass.DIGIT)}",
        f"Shift punctuation:   {_yes_no(options.shift_punctuation)}",
        f"Punct. shift amount: {table.reduced_shift(CharacterClass.PUNCTUATION)}",
        f"{options.direction.title} dictionary: {{{preview}, ...}}",
        f"Number chars read:   {result.bytes_processed}",
        f"Elapsed time:        {metrics.processing_time_ms:.3f} ms",
        f"Throughput:          {metrics.bytes_per_second:.0f} bytes/s",
        f"Resident memory:     {metrics.resident_memory_mb:.1f} MB",
        f"Memory growth:       {metrics.memory_delta_bytes} bytes",
        SUMMARY_BORDER,
    ]
    return "\n".join(lines) + "\n"


def run(
    argv: Sequence[str],
    direction: Direction,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run one cipher invocation and return its exit code.

    Args:
        argv: Full command line, program name first
        direction: Encipher or decipher
        stdout: Stream for usage, help and the character count
        stderr: Stream for errors and the diagnostic summary

    Returns:
        0 on success (including usage and help), 1 on any fatal error
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    if not argv:
        argv = [DEFAULT_PROGRAM_NAMES[direction]]

    outcome = parse_command_line(argv, direction)
    options = outcome.options
    prog = options.program_name_stripped or DEFAULT_PROGRAM_NAMES[direction]

    if outcome.status is ParseStatus.USAGE:
        print(format_usage(prog, direction), file=stdout)
        return EXIT_SUCCESS
    if outcome.status is ParseStatus.HELP:
        print(format_help(prog, direction), file=stdout)
        return EXIT_SUCCESS
    if outcome.status is ParseStatus.ERROR:
        error = outcome.error
        print(f"Error: {error}", file=stderr)
        for suggestion in (error.suggestions if error else []):
            print(f"  {suggestion}", file=stderr)
        return EXIT_FAILURE

    correlation_id = uuid.uuid4().hex[:8]
    configure_logging(verbose=options.show_log)
    logger = get_logger(__name__, correlation_id, "cli")

    try:
        config = options.to_config()
        table = ShiftTableBuilder(correlation_id).from_config(config)
        transformer = StreamTransformer(table, config.stream, correlation_id)
        result = transformer.transform_file(
            options.input_path, options.resolved_output_path
        )
    except CipherError as e:
        print(f"Error: {e}", file=stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=stderr)
        return EXIT_INTERRUPTED
    except Exception:
        logger.debug("Unhandled error during cipher run", exc_info=True)
        print("Unexpected error encountered. Program terminated.", file=stderr)
        return EXIT_FAILURE

    if options.show_log:
        print(format_summary(options, table, result), file=stderr)
    else:
        print(f"Read {result.bytes_processed} characters from the input file.", file=stdout)

    return EXIT_SUCCESS


def encipher_main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``shift-encipher``."""
    return run(sys.argv if argv is None else argv, Direction.ENCIPHER)


def decipher_main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``shift-decipher``."""
    return run(sys.argv if argv is None else argv, Direction.DECIPHER)


main = encipher_main


if __name__ == "__main__":
    sys.exit(main())
