"""Main CLI entry point for fa1codec."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import Fa1Error
from ..fileio import DEFAULT_FILENAME, dump_records, load_records, read_image, write_image
from ..utils.checksum import find_checksum_mismatches
from .report import report_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fa1codec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="fa1codec",
        description="fa1codec: FA1 Image Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  fa1codec --analyze {DEFAULT_FILENAME}              Show occupied slots
  fa1codec --dump {DEFAULT_FILENAME} > records.json  Decode to JSON
  fa1codec --build records.json -o {DEFAULT_FILENAME}  Encode from JSON
  fa1codec --check {DEFAULT_FILENAME}                Verify entry checksums
        """,
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--analyze",
        metavar="IMAGE",
        type=str,
        help="Show a slot-by-slot report of an FA1 image",
    )
    action.add_argument(
        "--dump",
        metavar="IMAGE",
        type=str,
        help="Decode an FA1 image and print its records as JSON",
    )
    action.add_argument(
        "--build",
        metavar="JSON",
        type=str,
        help="Build an FA1 image from a JSON records file",
    )
    action.add_argument(
        "--check",
        metavar="IMAGE",
        type=str,
        help="Report entries whose checksum the appliance would reject",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        default=DEFAULT_FILENAME,
        help=f"Output path for --build (default: {DEFAULT_FILENAME})",
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
        version=f"fa1codec {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = args.analyze or args.dump or args.build or args.check
    if source is None:
        # If no command specified, show help
        parser.print_help()
        return 0

    file_path = Path(source)
    if not file_path.exists():
        print(f"Error: File not found: {file_path}", file=sys.stderr)
        return 1

    try:
        if args.analyze:
            report_file(file_path)
        elif args.dump:
            print(dump_records(read_image(file_path)))
        elif args.build:
            contents = load_records(file_path.read_bytes())
            written = write_image(args.output, contents.programs, contents.alarms)
            print(
                f"Wrote {len(contents.programs)} programs and "
                f"{len(contents.alarms)} alarms to {written}"
            )
        else:
            return _check(file_path)
    except (Fa1Error, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _check(file_path: Path) -> int:
    mismatches = find_checksum_mismatches(file_path.read_bytes())
    for m in mismatches:
        print(
            f"{m.section} block {m.block} slot {m.slot} @{m.offset:04X}: "
            f"stored 0x{m.stored:02X}, expected 0x{m.calculated:02X}"
        )
    if mismatches:
        return 1
    print("All checksums OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
