"""Prompt texts for the vessel provenance lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from shipinfo.domain.types import VesselIdentity

SYSTEM_PROMPT: Final = (
    "You are a helpful assistant that returns information about ships in JSON format."
)

_JSON_ONLY: Final = (
    "You must ONLY return a JSON object with the above fields. No other text or comments."
)

VESSEL_SCHEMA: Final = """\
{
  "type": "object",
  "properties": {
    "vessel_name": { "type": "string" },
    "imo_number": { "type": "string" },
    "country_of_construction": { "type": "string" },
    "shipbuilder_name": { "type": "string" },
    "ship_flag": { "type": "string" },
    "year_built": { "type": "string" }
  },
  "required": ["vessel_name", "imo_number", "country_of_construction", "shipbuilder_name", "ship_flag", "year_built"]
}"""

CONSTRUCTION_SCHEMA: Final = """\
{
  "type": "object",
  "properties": {
    "country_of_construction": { "type": "string" },
    "shipbuilder_name": { "type": "string" }
  },
  "required": ["country_of_construction", "shipbuilder_name"]
}"""


def vessel_prompt(vessel: VesselIdentity) -> str:
    return (
        "I need to find the country of construction for the following ship:\n"
        f"Vessel Name: {vessel.vessel_name}\n"
        f"Vessel Type: {vessel.cargo_class}\n"
        f"Ship Registration Country: {vessel.registration_country}\n"
        f"Ship Carrier Name: {vessel.carrier_name}\n"
        f"Ship Carrier Code: {vessel.carrier_code}\n"
        "\n"
        "Please return the following information in JSON format according to this schema:\n"
        f"{VESSEL_SCHEMA}\n"
        "\n"
        f"{_JSON_ONLY}\n"
    )


def construction_prompt(vessel_name: str, imo_number: str) -> str:
    return (
        "For the following ship:\n"
        f"Vessel Name: {vessel_name}\n"
        f"IMO Number: {imo_number}\n"
        "\n"
        "Can you lookup the country of construction and ship builder?\n"
        "\n"
        "Please return the following information in JSON format according to this schema:\n"
        f"{CONSTRUCTION_SCHEMA}\n"
        "\n"
        f"{_JSON_ONLY}\n"
    )
