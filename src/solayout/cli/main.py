"""Main CLI entry point for solayout."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_file
from ..codec.decoder import decode
from ..exceptions import LayoutError
from ..serum.layouts import LAYOUTS


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the solayout CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="solayout: Fixed-width account layout codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  solayout --analyze layouts.py                    Show field offsets and sizes
  solayout --decode account_flags --hex 0300000000000000
                                                   Decode account bytes as JSON
  solayout --version                               Show version

Built-in layouts: {", ".join(sorted(LAYOUTS))}
        """,
    )

    parser.add_argument(
        "--analyze",
        metavar="FILE",
        type=str,
        help="Analyze layout classes and show field offsets and sizes",
    )

    parser.add_argument(
        "--decode",
        metavar="LAYOUT",
        choices=sorted(LAYOUTS),
        help="Decode --hex bytes with a built-in layout",
    )

    parser.add_argument(
        "--hex",
        metavar="DATA",
        type=str,
        help="Account bytes as a hex string",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject bytes left over after the last field",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"solayout {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.analyze:
        file_path = Path(args.analyze)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            analyze_file(file_path)
            return 0
        except Exception as e:
            print(f"Error analyzing file: {e}", file=sys.stderr)
            return 1

    if args.decode:
        if args.hex is None:
            print("Error: --decode requires --hex", file=sys.stderr)
            return 1

        try:
            data = bytes.fromhex(args.hex)
        except ValueError as e:
            print(f"Error: invalid hex data: {e}", file=sys.stderr)
            return 1

        try:
            record = decode(LAYOUTS[args.decode], data, strict=args.strict or None)
        except LayoutError as e:
            print(f"Error decoding {args.decode}: {e}", file=sys.stderr)
            return 1

        print(record.model_dump_json(indent=2))
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
