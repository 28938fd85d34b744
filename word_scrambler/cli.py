"""Command-line interface for the word scrambler.

WHY: Most uses are one-off: scramble a file or a piped paragraph and look
at the result. The CLI wires input acquisition, scrambling and output
behind a single command.

HOW: Uses argparse for input paths and a handful of options, reads all
inputs into one text, scrambles it and prints it followed by a newline.
Status and errors go to stderr so stdout can be piped.

RULES:
- Positional arguments: zero or more input files ("-" = stdin)
- No inputs: read standard input
- Multiple inputs are joined with a newline before scrambling
- --output writes to a file instead of stdout
- --seed (or WORD_SCRAMBLER_SEED) makes a run reproducible
- Exit codes: 0 = success, 1 = error, 130 = interrupted
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional

from word_scrambler import __version__
from word_scrambler.config import DEFAULT_ENCODING, load_log_level, load_seed
from word_scrambler.core.scrambler import scramble
from word_scrambler.sources import read_sources

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, flushed immediately."""
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else load_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def _make_rng(seed: Optional[int]) -> random.Random:
    """Build the random source for this run.

    RULES:
    - An explicit --seed wins over WORD_SCRAMBLER_SEED
    - No seed anywhere means an unseeded (non-deterministic) source
    """
    if seed is None:
        seed = load_seed()
    if seed is not None:
        logger.info("Using fixed seed %d", seed)
    return random.Random(seed)


def _write_output(output_path: Path, scrambled: str, encoding: str) -> None:
    """Write the scrambled text plus a line terminator to a file."""
    try:
        output_path.write_text(scrambled + "\n", encoding=encoding)
    except (OSError, LookupError, UnicodeEncodeError) as e:
        print("Error: Cannot write {}: {}".format(output_path, e), file=sys.stderr)
        sys.exit(1)
    _status("Wrote {} character(s) to {}".format(len(scrambled), output_path))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable without running it.
    """
    parser = argparse.ArgumentParser(
        prog="word_scrambler",
        description="Scramble the inner letters of every word with four or "
                    "more letters, keeping first and last letters in place.",
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        help="Text files to scramble ('-' for stdin). Default: read stdin.",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Write the scrambled text to this file instead of stdout.",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source for a reproducible result.",
    )

    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Encoding of input and output files (default: %(default)s).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.verbose)
        rng = _make_rng(args.seed)
        text = read_sources(args.inputs, encoding=args.encoding)
        scrambled = scramble(text, rng=rng)

        if args.output:
            _write_output(Path(args.output), scrambled, args.encoding)
        else:
            print(scrambled)
    except ValueError as e:
        # Unreadable inputs, undecodable stdin, bad environment settings
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        _status("\nCancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
