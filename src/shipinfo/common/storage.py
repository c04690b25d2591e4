"""Input/output location helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime
from pathlib import Path
from typing import Final

DEFAULT_MANIFEST_FILENAME: Final[str] = "us_imports_by_vessel_03182025.csv"
OUTPUT_FILENAME_PREFIX: Final[str] = "enhanced_ship_info"


def utc_today() -> date:
    return datetime.now(UTC).date()


def get_output_path(directory: Path | None = None, *, today: date | None = None) -> Path:
    """Return the dated report path, e.g. ``enhanced_ship_info_2025-03-18.csv``."""

    stamp = (today or utc_today()).isoformat()
    return (directory or Path.cwd()) / f"{OUTPUT_FILENAME_PREFIX}_{stamp}.csv"
