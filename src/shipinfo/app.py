"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections import Counter
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from shipinfo.adapters.manifest import ALL_ROWS, open_manifest
from shipinfo.adapters.perplexity import build_perplexity_client
from shipinfo.adapters.report import write_enrichment_report
from shipinfo.common.storage import get_output_path
from shipinfo.domain.enrichment import enrich_vessels
from shipinfo.domain.ingest_pipeline import normalize_manifest_rows, unique_vessels

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from shipinfo.adapters.manifest import RowLimit
    from shipinfo.domain.ports.lookup import VesselLookupClient
    from shipinfo.domain.types import EnrichmentResult, LookupStatus

log = getLogger(__name__)


@dataclass(slots=True)
class EnrichmentRunResult:
    written: int
    output_path: Path
    status_counts: Counter[LookupStatus] = field(default_factory=Counter["LookupStatus"])


def enrich_vessel_manifest(
    input_path: Path | str,
    *,
    output_path: Path | str | None = None,
    rows: RowLimit = ALL_ROWS,
    client: VesselLookupClient | None = None,
) -> EnrichmentRunResult:
    """Enrich every unique vessel in a manifest and write the dated report.

    A supplied ``client`` is used as-is and left open; otherwise a Perplexity
    client is built from the environment and closed when the run ends.
    """

    source = Path(input_path)
    target = Path(output_path) if output_path is not None else get_output_path()
    log.info("Starting vessel enrichment: input=%s, rows=%s, output=%s", source, rows, target)

    result = asyncio.run(_enrich_vessel_manifest_async(source, target, rows=rows, client=client))

    summary = ", ".join(f"{status}={count}" for status, count in sorted(result.status_counts.items()))
    log.info("Successfully processed %s ships and wrote results to %s", result.written, target)
    log.info("Lookup outcomes: %s", summary or "none")
    return result


async def _enrich_vessel_manifest_async(
    source: Path,
    target: Path,
    *,
    rows: RowLimit,
    client: VesselLookupClient | None,
) -> EnrichmentRunResult:
    result = EnrichmentRunResult(written=0, output_path=target)

    async def tallied(results: AsyncIterator[EnrichmentResult]) -> AsyncIterator[EnrichmentResult]:
        async for enriched in results:
            result.status_counts[enriched.lookup_status] += 1
            yield enriched

    with open_manifest(source, rows) as manifest_rows:
        vessels = unique_vessels(normalize_manifest_rows(manifest_rows))
        if client is not None:
            result.written = await write_enrichment_report(
                tallied(enrich_vessels(vessels, client)), target
            )
            return result

        async with build_perplexity_client() as perplexity:
            result.written = await write_enrichment_report(
                tallied(enrich_vessels(vessels, perplexity)), target
            )
    return result
