#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from shipinfo.adapters.manifest import ALL_ROWS, parse_row_limit
from shipinfo.app import enrich_vessel_manifest
from shipinfo.common.storage import DEFAULT_MANIFEST_FILENAME
from shipinfo.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from shipinfo.adapters.manifest import RowLimit


def _row_limit(value: str) -> RowLimit:
    try:
        return parse_row_limit(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Look up construction provenance for vessels in a bill-of-lading export"
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=Path(DEFAULT_MANIFEST_FILENAME),
        help="Bill-of-lading CSV export to read (default: %(default)s)",
    )
    parser.add_argument(
        "--rows",
        type=_row_limit,
        default=ALL_ROWS,
        help="Number of manifest rows to read, or 'all' (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Report path (default: enhanced_ship_info_<UTC date>.csv)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    enrich_vessel_manifest(args.input, output_path=args.output, rows=args.rows)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    configure_logging()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
