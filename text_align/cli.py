"""CLI wrapper for the text aligner.

WHY: The aligner is meant to sit in shell pipelines like ``fold``:
``cat notes.txt | python -m text_align 60 center``. This module turns
positional keywords into an AlignConfig and streams stdin to stdout.

HOW: parse_args() walks argv by hand, because mode keywords and the width
may appear in any order and the last of each wins. The resulting config is
validated by the AlignConfig pydantic model. main() reports argument errors
on stderr and exits 1 before touching stdin; otherwise it writes the chunks
produced by core.align_stream().

RULES:
- Usage:
    python -m text_align [WIDTH] [left|right|center|justify] [-v]
- Defaults: width 72, mode justify.
- WIDTH is a plain ASCII integer. Any other token, or a width outside
  1-255, is an error.
- Bytes that do not decode on stdin are written back out unchanged.
- Exit codes: 0 = success, 1 = invalid arguments.
- Aligned text goes to stdout; errors and log messages go to stderr.
"""

import logging
import sys
from typing import List, Optional, TextIO, Tuple

from pydantic import ValidationError

from .config import AlignConfig
from .core import align_stream
from .presets import ALIGNMENTS, DEFAULT_ALIGNMENT, DEFAULT_WIDTH, MAX_WIDTH, MIN_WIDTH

logger = logging.getLogger(__name__)

HELP_TEXT = """text_align — fold and align text to a fixed width

Usage:
    python -m text_align [WIDTH] [MODE] [-v] < input.txt

Arguments (any order, last one wins):
    WIDTH    Line width in characters, {min}-{max} (default {width})
    MODE     left | right | center | justify (default {mode})

Options:
    -v, --verbose   Log debug messages to stderr
    -h, --help      Show this message

Blank lines and lines starting with | * - # are printed unchanged.
""".format(
    min=MIN_WIDTH, max=MAX_WIDTH, width=DEFAULT_WIDTH, mode=DEFAULT_ALIGNMENT.value
)


class ArgumentError(ValueError):
    """A command-line token that is neither a mode keyword nor a valid width."""


def _is_width_token(arg: str) -> bool:
    """True for plain ASCII integer strings such as ``60`` or ``-5``."""
    digits = arg[1:] if arg.startswith("-") else arg
    return digits.isascii() and digits.isdigit()


def parse_args(argv: List[str]) -> Tuple[AlignConfig, bool]:
    """Parse positional tokens into a config and the verbose flag.

    Args:
        argv: Command-line tokens, without the program name.

    Returns:
        Tuple of (AlignConfig, verbose).

    Raises:
        ArgumentError: On an unknown token or an out-of-range width.
    """
    width = DEFAULT_WIDTH
    mode = DEFAULT_ALIGNMENT
    verbose = False

    for arg in argv:
        if arg in ALIGNMENTS:
            mode = ALIGNMENTS[arg]
        elif arg in ("-v", "--verbose"):
            verbose = True
        elif _is_width_token(arg):
            width = int(arg)
        else:
            raise ArgumentError("Unrecognized argument '{}'".format(arg))

    try:
        config = AlignConfig(width=width, mode=mode)
    except ValidationError:
        raise ArgumentError(
            "Width must be between {} and {}, got {}".format(MIN_WIDTH, MAX_WIDTH, width)
        )

    return config, verbose


def _pass_undecodable_bytes(stream: TextIO) -> None:
    """Round-trip bytes that are not valid in the stream's encoding."""
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors="surrogateescape")


def main(argv: Optional[List[str]] = None) -> None:
    """Run the text aligner CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    if argv is None:
        argv = sys.argv[1:]

    args = list(argv)

    if "-h" in args or "--help" in args:
        print(HELP_TEXT)
        sys.exit(0)

    try:
        config, verbose = parse_args(args)
    except ArgumentError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logging.getLogger("text_align").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.debug("Aligning stdin to width %d (%s)", config.width, config.mode.value)

    _pass_undecodable_bytes(sys.stdin)
    _pass_undecodable_bytes(sys.stdout)

    for chunk in align_stream(sys.stdin, config):
        sys.stdout.write(chunk)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
