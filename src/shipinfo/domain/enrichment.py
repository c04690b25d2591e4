"""Domain services for vessel provenance enrichment."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING, Final

from shipinfo.domain.ports.lookup import LookupTransportError
from shipinfo.domain.types import (
    ConstructionFacts,
    EnrichmentResult,
    LookupStatus,
    VesselFacts,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterable

    from shipinfo.domain.ports.lookup import VesselLookupClient
    from shipinfo.domain.types import VesselIdentity

log = getLogger(__name__)

UNKNOWN_COUNTRY: Final = "Unknown"


def decode_payload(content: str) -> dict[str, object] | None:
    """Decode assistant content into a JSON object, or ``None`` if it is not one."""

    try:
        payload = json.loads(content)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    return payload


def needs_construction_lookup(facts: VesselFacts) -> bool:
    """True when an IMO number is known but the construction country is not."""

    return bool(facts.imo_number) and facts.country_of_construction in ("", UNKNOWN_COUNTRY)


def merge_construction_details(primary: VesselFacts, secondary: ConstructionFacts) -> VesselFacts:
    """Overlay non-empty construction details from the follow-up lookup."""

    return VesselFacts(
        imo_number=primary.imo_number,
        ship_flag=primary.ship_flag,
        country_of_construction=(
            secondary.country_of_construction or primary.country_of_construction
        ),
        shipbuilder_name=secondary.shipbuilder_name or primary.shipbuilder_name,
        year_built=primary.year_built,
    )


async def enrich_vessel(vessel: VesselIdentity, client: VesselLookupClient) -> EnrichmentResult:
    """Look up one vessel, retrying by IMO number when construction data is missing."""

    try:
        reply = await client.lookup_vessel(vessel)
    except LookupTransportError as exc:
        log.warning("Lookup request failed for %s: %s", vessel.vessel_name, exc)
        return EnrichmentResult.failed(vessel, status=LookupStatus.API_ERROR, raw_response=str(exc))

    if reply.content is None:
        log.warning("Unexpected lookup response for %s", vessel.vessel_name)
        return EnrichmentResult.failed(vessel, status=LookupStatus.API_ERROR, raw_response=reply.body)

    payload = decode_payload(reply.content)
    if payload is None:
        log.warning("Lookup content for %s is not a JSON object", vessel.vessel_name)
        return EnrichmentResult.failed(vessel, status=LookupStatus.FAIL, raw_response=reply.content)

    facts = VesselFacts.from_payload(payload)
    if not needs_construction_lookup(facts):
        return EnrichmentResult.from_facts(vessel, facts, status=LookupStatus.SUCCESS)

    log.info(
        "Construction details missing for %s, retrying with IMO %s",
        vessel.vessel_name,
        facts.imo_number,
    )
    construction = await _lookup_construction(client, vessel.vessel_name, facts.imo_number)
    return EnrichmentResult.from_facts(
        vessel,
        merge_construction_details(facts, construction),
        status=LookupStatus.SUCCESS_WITH_RETRY,
    )


async def enrich_vessels(
    vessels: Iterable[VesselIdentity],
    client: VesselLookupClient,
) -> AsyncIterator[EnrichmentResult]:
    """Enrich vessels strictly one after another, yielding each result as it completes."""

    for vessel in vessels:
        log.info("Processing %s...", vessel.vessel_name)
        yield await enrich_vessel(vessel, client)


async def _lookup_construction(
    client: VesselLookupClient,
    vessel_name: str,
    imo_number: str,
) -> ConstructionFacts:
    try:
        reply = await client.lookup_construction(vessel_name, imo_number)
    except LookupTransportError as exc:
        log.warning("IMO lookup request failed for %s: %s", vessel_name, exc)
        return ConstructionFacts()

    if reply.content is None:
        log.warning("Unexpected IMO lookup response for %s", vessel_name)
        return ConstructionFacts()
    payload = decode_payload(reply.content)
    if payload is None:
        log.warning("IMO lookup content for %s is not a JSON object", vessel_name)
        return ConstructionFacts()
    return ConstructionFacts.from_payload(payload)
