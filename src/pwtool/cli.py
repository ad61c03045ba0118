"""Command-line interface for pwtool.

Usage:
    pwtool                          # 10 passwords of length 16
    pwtool -n 5 -l 24               # 5 passwords of length 24
    pwtool --nospecial -l 20        # letters and digits only
    pwtool -n 100 -csv out.csv -q   # export to CSV, print passwords only
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pwtool import __version__
from pwtool.builder import MAX_LENGTH, MIN_LENGTH
from pwtool.config import load_config, resolve_config
from pwtool.exceptions import PwtoolError
from pwtool.export import write_csv, write_txt
from pwtool.generator import PasswordGenerator

logger = logging.getLogger("pwtool")


def _count(value: str) -> int:
    try:
        count = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}") from None
    if count < 1:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r} (must be >= 1)")
    return count


def _length(value: str) -> int:
    try:
        length = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}") from None
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise argparse.ArgumentTypeError(
            f"invalid length: {value!r} (must be between {MIN_LENGTH} and {MAX_LENGTH})"
        )
    return length


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pwtool",
        description="Generate cryptographically strong random passwords.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s -n 5 -l 24                 # Five 24-character passwords
  %(prog)s --specials '!#%%'           # Custom special characters
  %(prog)s --nospecial -txt out.txt   # Letters and digits, saved to TXT
  %(prog)s -n 50 -csv out.csv -q      # Numbered CSV, passwords only on stdout

Defaults can also be set with PWTOOL_* environment variables.
""",
    )
    parser.add_argument(
        "-n", "--count",
        type=_count,
        default=None,
        help="Number of passwords (default: 10).",
    )
    parser.add_argument(
        "-l", "--length",
        type=_length,
        default=None,
        help=f"Password length, {MIN_LENGTH} to {MAX_LENGTH} (default: {MIN_LENGTH}).",
    )
    parser.add_argument(
        "--specials",
        metavar="CHARS",
        default=None,
        help="Override the special characters set.",
    )
    parser.add_argument(
        "--nospecial",
        dest="no_special",
        action="store_true",
        default=None,
        help="Exclude special characters entirely.",
    )
    parser.add_argument(
        "-txt", "--txt",
        dest="txt",
        metavar="FILE",
        help="Save passwords to a .txt file (one per line).",
    )
    parser.add_argument(
        "-csv", "--csv",
        dest="csv",
        metavar="FILE",
        help="Save passwords to a CSV (Excel-friendly, numbered).",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only print passwords to stdout).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Generate and emit passwords for parsed arguments.

    Returns:
        Process exit status.
    """
    try:
        config = resolve_config(
            load_config(),
            {
                "count": args.count,
                "length": args.length,
                "specials": args.specials,
                "no_special": args.no_special,
            },
        )
        with PasswordGenerator(config) as generator:
            passwords = generator.generate_batch()

        if not args.quiet:
            print(
                f"Generated {len(passwords)} password(s) of length {config.length}"
                f"{' (no specials)' if config.no_special else ''}."
            )
        for password in passwords:
            print(password)

        if args.txt:
            write_txt(args.txt, passwords)
            if not args.quiet:
                print(f"Wrote TXT: {args.txt}")
        if args.csv:
            write_csv(args.csv, passwords)
            if not args.quiet:
                print(f"Wrote CSV: {args.csv}")
    except PwtoolError as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _bind_specials(argv: Sequence[str]) -> list[str]:
    """Join ``--specials VALUE`` into ``--specials=VALUE``.

    Special sets often start with ``-``, which argparse would otherwise read
    as the next option rather than as the value.
    """
    bound: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--specials":
            value = next(tokens, None)
            if value is not None:
                token = f"--specials={value}"
        bound.append(token)
    return bound


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``pwtool`` console script."""
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_bind_specials(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
