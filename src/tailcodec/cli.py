"""Command-line interface for tailcodec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import tailcodec
from tailcodec._utils import SAMPLE_SIZE
from tailcodec.enums import EncodingDecision


def _format(decision: EncodingDecision, use_codec: bool) -> str:
    return decision.codec if use_codec else decision.display_name


def main(argv: list[str] | None = None) -> None:
    """Run the ``tailcodec`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the encoding a log file should be tailed with."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "--codec",
        action="store_true",
        help="Print the Python codec name instead of the display name",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection details"
    )
    parser.add_argument(
        "--version", action="version", version=f"tailcodec {tailcodec.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(levelname)s: %(message)s"
        )

    failed = False
    if args.files:
        for filepath in args.files:
            # detect_encoding degrades silently; report non-files here
            if not Path(filepath).is_file():
                print(f"tailcodec: {filepath}: not a regular file", file=sys.stderr)
                failed = True
                continue
            decision = tailcodec.detect_encoding(filepath)
            name = _format(decision, args.codec)
            if args.minimal:
                print(name)
            else:
                print(f"{filepath}: {name}")
    else:
        data = sys.stdin.buffer.read(SAMPLE_SIZE)
        decision = tailcodec.detect_bytes(data)
        name = _format(decision, args.codec)
        if args.minimal:
            print(name)
        else:
            print(f"stdin: {name}")

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
