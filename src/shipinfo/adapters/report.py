"""CSV writer for enriched vessel records."""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import AsyncIterable
    from pathlib import Path

    from shipinfo.domain.types import EnrichmentResult

log = getLogger(__name__)

REPORT_COLUMNS: Final[tuple[str, ...]] = (
    "vessel_name",
    "ship_type",
    "ship_registration_country",
    "ship_carrier_name",
    "ship_carrier_code",
    "imo_number",
    "ship_flag",
    "country_of_construction",
    "shipbuilder_name",
    "year_built",
    "lookup_status",
    "raw_response",
)


def report_row(result: EnrichmentResult) -> list[str]:
    return [
        result.vessel_name,
        result.cargo_class,
        result.registration_country,
        result.carrier_name,
        result.carrier_code,
        result.imo_number,
        result.ship_flag,
        result.country_of_construction,
        result.shipbuilder_name,
        result.year_built,
        str(result.lookup_status),
        result.raw_response,
    ]


async def write_enrichment_report(
    results: AsyncIterable[EnrichmentResult],
    output_path: Path,
) -> int:
    """Write a fresh report and return the number of data rows written.

    The file is truncated before the header is written. Rows are written as
    results arrive; if the run dies midway the partial file stays on disk.
    """

    count = 0
    with output_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle)
        writer.writerow(REPORT_COLUMNS)
        async for result in results:
            writer.writerow(report_row(result))
            handle.flush()
            count += 1
    log.debug("Wrote %s rows to %s", count, output_path)
    return count
