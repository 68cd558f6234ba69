"""Main CLI entry point for bitsparrow."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .. import __version__
from ..codec.size import encode_size
from ..exceptions import BitsparrowError
from .convert import decode_values, encode_values, format_value, parse_pair

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitsparrow",
        description="bitsparrow: Compact Binary Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bitsparrow --size 300                                  Show the size header for 300
  bitsparrow --encode uint8:200 string:hi bool:true      Encode values to hex
  bitsparrow --decode c8 02 68 69 01 --types uint8,string,bool
                                                         Decode hex back to values
        """,
    )

    parser.add_argument(
        "--size",
        metavar="N",
        type=int,
        help="Print the hex size header for N",
    )

    parser.add_argument(
        "--encode",
        metavar="KIND:VALUE",
        nargs="+",
        help="Encode values in order and print the result as hex",
    )

    parser.add_argument(
        "--decode",
        metavar="HEX",
        nargs="+",
        help="Hex bytes to decode (spaces allowed)",
    )

    parser.add_argument(
        "--types",
        metavar="KINDS",
        help="Comma-separated wire kinds to read with --decode",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default WARNING)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bitsparrow {__version__}",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the bitsparrow CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.size is not None:
            print(encode_size(args.size).hex())
            return 0

        if args.encode:
            pairs = [parse_pair(item) for item in args.encode]
            print(encode_values(pairs).hex())
            return 0

        if args.decode:
            if not args.types:
                print("Error: --decode requires --types", file=sys.stderr)
                return 1
            kinds = [kind.strip() for kind in args.types.split(",") if kind.strip()]
            data = bytes.fromhex("".join(args.decode))
            logger.debug("Decoding %d bytes as %s", len(data), kinds)
            for kind, value in zip(kinds, decode_values(data, kinds)):
                print(f"{kind}: {format_value(kind, value)}")
            return 0
    except (BitsparrowError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
