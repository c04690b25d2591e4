"""Bill-of-lading CSV manifest reader."""

from __future__ import annotations

import csv
from contextlib import contextmanager
from itertools import islice
from typing import TYPE_CHECKING, Final, Literal

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

type RowLimit = int | Literal["all"]

ALL_ROWS: Final = "all"


def validate_row_limit(rows: RowLimit) -> int | None:
    """Return the number of rows to read, ``None`` meaning the whole file."""

    if rows == ALL_ROWS:
        return None
    if isinstance(rows, int) and not isinstance(rows, bool) and rows > 0:
        return rows
    raise ValueError(f"rows must be {ALL_ROWS!r} or a positive integer, got {rows!r}")


def parse_row_limit(value: str) -> RowLimit:
    """Parse a command-line row limit (``all`` or a positive integer)."""

    if value.strip().lower() == ALL_ROWS:
        return ALL_ROWS
    try:
        rows = int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid row limit: {value}") from exc
    validate_row_limit(rows)
    return rows


@contextmanager
def open_manifest(
    path: Path, rows: RowLimit = ALL_ROWS
) -> Iterator[Iterator[dict[str, str | None]]]:
    """Open the manifest and yield its data rows as header-keyed mappings.

    The limit is checked and the file opened on entry, so a bad argument or a
    missing file fails before any output is produced. Rows are read lazily and
    the file is closed when the block exits, however it exits.
    """

    limit = validate_row_limit(rows)
    with path.open(newline="", encoding="utf-8-sig") as handle:
        yield islice(csv.DictReader(handle), limit)
