"""Core value types for vessel provenance enrichment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class CargoClass(StrEnum):
    TANKER = "Tanker / Chemical Tanker"
    DRY_BULK = "Dry Bulk"
    CONTAINER = "Container"


class LookupStatus(StrEnum):
    SUCCESS = "success"
    SUCCESS_WITH_RETRY = "success_with_retry"
    FAIL = "fail"
    API_ERROR = "api_error"


@dataclass(frozen=True, slots=True)
class VesselIdentity:
    """A vessel as described by the shipment manifest.

    ``vessel_name`` is the uniqueness key (exact, case-sensitive).
    """

    vessel_name: str
    cargo_class: str = CargoClass.CONTAINER
    registration_country: str = ""
    carrier_name: str = ""
    carrier_code: str = ""


def payload_text(value: object) -> str:
    """Coerce a decoded JSON value into a CSV-friendly string."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True, slots=True)
class VesselFacts:
    """Provenance facts returned by the primary lookup."""

    imo_number: str = ""
    ship_flag: str = ""
    country_of_construction: str = ""
    shipbuilder_name: str = ""
    year_built: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> VesselFacts:
        return cls(
            imo_number=payload_text(payload.get("imo_number")),
            ship_flag=payload_text(payload.get("ship_flag")),
            country_of_construction=payload_text(payload.get("country_of_construction")),
            shipbuilder_name=payload_text(payload.get("shipbuilder_name")),
            year_built=payload_text(payload.get("year_built")),
        )


@dataclass(frozen=True, slots=True)
class ConstructionFacts:
    """Construction details returned by the IMO-keyed follow-up lookup."""

    country_of_construction: str = ""
    shipbuilder_name: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> ConstructionFacts:
        return cls(
            country_of_construction=payload_text(payload.get("country_of_construction")),
            shipbuilder_name=payload_text(payload.get("shipbuilder_name")),
        )


@dataclass(frozen=True, slots=True)
class EnrichmentResult:
    vessel_name: str
    cargo_class: str
    registration_country: str
    carrier_name: str
    carrier_code: str
    imo_number: str
    ship_flag: str
    country_of_construction: str
    shipbuilder_name: str
    year_built: str
    lookup_status: LookupStatus
    raw_response: str = ""

    @classmethod
    def from_facts(
        cls,
        vessel: VesselIdentity,
        facts: VesselFacts,
        *,
        status: LookupStatus,
        raw_response: str = "",
    ) -> EnrichmentResult:
        return cls(
            vessel_name=vessel.vessel_name,
            cargo_class=vessel.cargo_class,
            registration_country=vessel.registration_country,
            carrier_name=vessel.carrier_name,
            carrier_code=vessel.carrier_code,
            imo_number=facts.imo_number,
            ship_flag=facts.ship_flag,
            country_of_construction=facts.country_of_construction,
            shipbuilder_name=facts.shipbuilder_name,
            year_built=facts.year_built,
            lookup_status=status,
            raw_response=raw_response,
        )

    @classmethod
    def failed(
        cls,
        vessel: VesselIdentity,
        *,
        status: LookupStatus,
        raw_response: str,
    ) -> EnrichmentResult:
        """Result with every enrichment field blank and the diagnostic kept."""

        return cls.from_facts(vessel, VesselFacts(), status=status, raw_response=raw_response)
