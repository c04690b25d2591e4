"""Manifest ingestion stages.

Each stage is a generator over the previous one, so a manifest is normalized
and deduplicated one row at a time.
"""

from __future__ import annotations

from .deduplication import unique_vessels
from .normalization import classify_quantity_unit, normalize_manifest_row, normalize_manifest_rows

__all__ = [
    "classify_quantity_unit",
    "normalize_manifest_row",
    "normalize_manifest_rows",
    "unique_vessels",
]
