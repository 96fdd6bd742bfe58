"""Command-line option model for the shift cipher tools.

Parses a flat argv-style token list into ``CipherOptions``. Parsing never
raises for user mistakes; it returns a ``ParseOutcome`` tagged with a
``ParseStatus`` and, for errors, the ``OptionParseError`` describing the
offending token.

Rules:
- token 0 is the program name; no further tokens requests the usage text
- ``-i/--ifile``, ``-o/--ofile`` and ``-s/--shift-amount`` take one value
- ``-n``, ``-p``, ``-a``, ``-l`` and ``-h`` may be combined (``-np``, ``-apl``)
- ``-h/--help`` stops option processing
"""

import argparse
import re
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Deque, Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..shared.config import (
    DEFAULT_SHIFT_AMOUNT,
    SHIFT_MAX,
    SHIFT_MIN,
    CipherConfig,
    Direction,
)
from ..shared.errors import IntegerParseError, OptionParseError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_SHIFT_DIGITS = len(str(SHIFT_MAX))


class ParseStatus(Enum):
    """Outcome of parsing a command line."""

    OK = auto()         # Options parsed, continue with the run
    USAGE = auto()      # No options given, print usage and stop
    HELP = auto()       # Help requested, print help and stop
    ERROR = auto()      # Invalid command line, report and stop


@dataclass(frozen=True)
class OptionSpec:
    """Description of one recognized option."""

    short: str
    long: str
    help: str
    metavar: Optional[str] = None
    flags: FrozenSet[str] = frozenset()
    aliases: Tuple[str, ...] = ()

    @property
    def takes_value(self) -> bool:
        return self.metavar is not None

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.short, self.long) + self.aliases


OPTION_SPECS: Tuple[OptionSpec, ...] = (
    OptionSpec("-i", "--ifile", "Name of input file to read (ASCII or UTF-8 text)",
               metavar="IFILE"),
    OptionSpec("-o", "--ofile",
               "Name of output file to write (overwritten if it exists). "
               "Default: IFILE with {suffix} appended",
               metavar="OFILE"),
    OptionSpec("-s", "--shift-amount",
               f"Number of characters to shift the alphabet (default: {DEFAULT_SHIFT_AMOUNT})",
               metavar="SHIFT"),
    OptionSpec("-n", "--shift-nums", "Include digits in the shifted alphabet",
               flags=frozenset({"shift_digits"}), aliases=("--shift-numbers",)),
    OptionSpec("-p", "--shift-puncts", "Include punctuation in the shifted alphabet",
               flags=frozenset({"shift_punctuation"})),
    OptionSpec("-a", "--shift-all", "Shift both digits and punctuation",
               flags=frozenset({"shift_digits", "shift_punctuation"})),
    OptionSpec("-l", "--show-log", "Print a diagnostic summary after processing",
               flags=frozenset({"show_log"})),
    OptionSpec("-h", "--help", "Print this HELP message and stop without processing",
               flags=frozenset({"help_requested"})),
)

# Single-character flags that may be combined into one token
COMBINABLE_FLAGS: Dict[str, OptionSpec] = {
    spec.short[1]: spec for spec in OPTION_SPECS if not spec.takes_value
}

EXAMPLES = (
    "{prog} -a -i hello.txt",
    "{prog} -np -s 15 -i what.txt -o this.out",
    "{prog} --ofile temp.txt --ifile perm.txt -pn -s -80",
)


@dataclass
class CipherOptions:
    """Options collected from the command line."""

    program_name: str = ""
    program_name_stripped: str = ""
    direction: Direction = Direction.ENCIPHER
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    use_default_output_name: bool = True
    shift_amount: int = DEFAULT_SHIFT_AMOUNT
    shift_digits: bool = False
    shift_punctuation: bool = False
    show_log: bool = False
    help_requested: bool = False

    @property
    def resolved_output_path(self) -> Path:
        """Output path, derived from the input name unless ``-o`` was given."""
        if self.use_default_output_name or self.output_path is None:
            if self.input_path is None:
                raise ValueError("input_path is not set")
            return Path(self.input_path + self.direction.default_suffix)
        return Path(self.output_path)

    def to_config(self) -> CipherConfig:
        """Build the cipher configuration these options describe."""
        return CipherConfig(
            shift_amount=self.shift_amount,
            shift_digits=self.shift_digits,
            shift_punctuation=self.shift_punctuation,
            direction=self.direction,
        )


@dataclass
class ParseOutcome:
    """Tagged result of parsing a command line."""

    status: ParseStatus
    options: CipherOptions
    error: Optional[OptionParseError] = None

    @property
    def should_run(self) -> bool:
        """Whether the cipher should process a file."""
        return self.status is ParseStatus.OK


def parse_shift_amount(token: str) -> int:
    """Parse a signed decimal shift amount.

    Raises:
        IntegerParseError: If the token is not an integer or is out of range
    """
    if not INTEGER_PATTERN.fullmatch(token):
        raise IntegerParseError(token)

    out_of_range = IntegerParseError(
        token,
        f"Shift amount ({token}) is out of range [{SHIFT_MIN}, {SHIFT_MAX}].",
    )
    # Bound the digit count before int(), which refuses very long strings
    sign = "-" if token.startswith("-") else ""
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > MAX_SHIFT_DIGITS:
        raise out_of_range

    value = int(sign + digits)
    if not SHIFT_MIN <= value <= SHIFT_MAX:
        raise out_of_range
    return value


class OptionParser:
    """Parses argv-style token lists for one cipher direction."""

    def __init__(self, direction: Direction = Direction.ENCIPHER) -> None:
        self.direction = direction
        self._by_name: Dict[str, OptionSpec] = {
            name: spec for spec in OPTION_SPECS for name in spec.names
        }

    def parse(self, argv: Sequence[str]) -> ParseOutcome:
        """Parse a full command line, program name included.

        Args:
            argv: Command-line tokens; token 0 is the program name

        Returns:
            ParseOutcome tagged with the parse status
        """
        program_name = argv[0] if argv else ""
        options = CipherOptions(
            program_name=program_name,
            program_name_stripped=Path(program_name).name,
            direction=self.direction,
        )

        tokens: Deque[str] = deque(argv[1:])
        if not tokens:
            return ParseOutcome(ParseStatus.USAGE, options)

        try:
            while tokens:
                token = tokens.popleft()
                spec = self._by_name.get(token)

                if spec is not None and spec.takes_value:
                    if not tokens:
                        raise OptionParseError(
                            token, f"Missing value after option ({token})."
                        )
                    self._apply_value(spec, tokens.popleft(), options)
                elif spec is not None:
                    self._apply_flags(spec.flags, options)
                elif self._is_combined(token):
                    self._apply_flags(self._parse_combined(token), options)
                else:
                    raise OptionParseError(token)

                if options.help_requested:
                    return ParseOutcome(ParseStatus.HELP, options)

            if options.input_path is None:
                raise OptionParseError(
                    "-i/--ifile", "Required input file option (-i/--ifile) is missing."
                )
        except OptionParseError as e:
            return ParseOutcome(ParseStatus.ERROR, options, e)

        return ParseOutcome(ParseStatus.OK, options)

    @staticmethod
    def _is_combined(token: str) -> bool:
        return len(token) > 2 and token.startswith("-") and not token.startswith("--")

    @staticmethod
    def _parse_combined(token: str) -> FrozenSet[str]:
        """Collect the flags of a combined token such as ``-npl``.

        Flags are staged and only applied once the whole token is accepted, so
        a rejected token leaves earlier tokens' effects untouched. ``h`` ends
        the scan; characters after it are not checked.
        """
        if "-" in token[1:]:
            raise OptionParseError(token)

        staged: set = set()
        for character in token[1:]:
            spec = COMBINABLE_FLAGS.get(character)
            if spec is None:
                raise OptionParseError(token, character=character)
            staged.update(spec.flags)
            if "help_requested" in spec.flags:
                break
        return frozenset(staged)

    @staticmethod
    def _apply_flags(flags: FrozenSet[str], options: CipherOptions) -> None:
        for name in flags:
            setattr(options, name, True)

    @staticmethod
    def _apply_value(spec: OptionSpec, value: str, options: CipherOptions) -> None:
        if spec.short == "-i":
            options.input_path = value
        elif spec.short == "-o":
            options.output_path = value
            options.use_default_output_name = False
        elif spec.short == "-s":
            options.shift_amount = parse_shift_amount(value)


def parse_command_line(
    argv: Sequence[str], direction: Direction = Direction.ENCIPHER
) -> ParseOutcome:
    """Parse a command line for the given direction."""
    return OptionParser(direction).parse(argv)


def create_argument_parser(prog: str, direction: Direction) -> argparse.ArgumentParser:
    """Create an argument parser describing the options, used to render help.

    Token parsing is done by ``OptionParser``; this parser only formats the
    option table consistently.
    """
    suffix = direction.default_suffix
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"{direction.title} a text file with a circular shift cipher.",
        usage="%(prog)s [options] -i <IFILE> [-o <OFILE>]",
        epilog="Examples:\n" + "\n".join(
            "  " + example.format(prog=prog) for example in EXAMPLES
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    required = parser.add_argument_group("Required")
    optional = parser.add_argument_group("Options")
    for spec in OPTION_SPECS:
        group = required if spec.short == "-i" else optional
        help_text = spec.help.format(suffix=suffix)
        if spec.takes_value:
            group.add_argument(spec.short, spec.long, metavar=spec.metavar, help=help_text)
        else:
            group.add_argument(spec.short, spec.long, action="store_true", help=help_text)

    return parser


def format_help(prog: str, direction: Direction) -> str:
    """Render the full HELP message."""
    return create_argument_parser(prog, direction).format_help()


def format_usage(prog: str, direction: Direction) -> str:
    """Render the short usage message shown when no options are given."""
    suffix = direction.default_suffix
    lines: List[str] = [
        "Usage:",
        f"{prog} -i <IFILE>             to read IFILE and write IFILE{suffix}",
        f"{prog} -i <IFILE> -o <OFILE>  to control the name of the output file",
        "",
        f"{prog} -h",
        f"{prog} --help   for the full HELP message",
    ]
    return "\n".join(lines) + "\n"
