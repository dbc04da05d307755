"""Command line interface of the entropy tests."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from os import PathLike
from typing import BinaryIO, Union

from .chisqr import I_SQRT_PI, LOG_SQRT_PI
from .suite import Entest, EntestResult

CHUNK_SIZE = 8192


def analyze_stream(stream: BinaryIO) -> EntestResult:
    """Run every test over a binary stream read to its end."""
    suite = Entest()
    while chunk := stream.read(CHUNK_SIZE):
        suite.update(chunk)
    return suite.finalize()


def analyze_file(path: Union[str, "PathLike[str]"]) -> EntestResult:
    """Run every test over the contents of a file."""
    with open(path, "rb") as handle:
        return analyze_stream(handle)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entest",
        description=(
            "entest (entropy test) applies tests to byte sequences "
            "stored in files or streams."
        ),
    )
    parser.add_argument("-i", "--info", action="store_true", help="show build info.")
    parser.add_argument(
        "-b", "--bits", action="store_true", help="treat input as a stream of bits."
    )
    parser.add_argument(
        "-c", "--counts", action="store_true", help="print occurrence counts."
    )
    parser.add_argument(
        "-f", "--fold", action="store_true", help="fold upper to lower case letters."
    )
    parser.add_argument(
        "-t", "--terse", action="store_true", help="terse output in CSV format."
    )
    parser.add_argument("-u", "--usage", action="store_true", help="print this message.")
    parser.add_argument(
        "file", nargs="?", help="file to read; standard input when omitted."
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.info:
        print(f"(LOG_SQRT_PI = {LOG_SQRT_PI})", file=sys.stderr)
        print(f"(I_SQRT_PI = {I_SQRT_PI})", file=sys.stderr)
    if args.usage:
        parser.print_help()
        return 0

    try:
        if args.file is not None:
            result = analyze_file(args.file)
        else:
            result = analyze_stream(sys.stdin.buffer)
    except OSError as exc:
        print(f"entest: {exc}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())