"""Manifest row normalization."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from shipinfo.domain.types import CargoClass, VesselIdentity

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

VESSEL_NAME_COLUMN: Final = "VESSEL NAME"
QUANTITY_UNIT_COLUMN: Final = "QUANTITY UNIT"
REGISTRATION_COUNTRY_COLUMN: Final = "SHIP REGISTERED IN"
CARRIER_NAME_COLUMN: Final = "CARRIER NAME"
CARRIER_CODE_COLUMN: Final = "CARRIER CODE"

_QUANTITY_UNIT_CLASSES: Final[dict[str, CargoClass]] = {
    "LBK": CargoClass.TANKER,
    "DBK": CargoClass.DRY_BULK,
    "CBC": CargoClass.DRY_BULK,
}


def classify_quantity_unit(quantity_unit: str) -> CargoClass:
    """Map a bill-of-lading quantity unit code onto a cargo class.

    Liquid bulk is reported as tankers, dry and containerised bulk as dry bulk;
    any other code (or none) is assumed to be container cargo.
    """

    return _QUANTITY_UNIT_CLASSES.get(quantity_unit, CargoClass.CONTAINER)


def normalize_manifest_row(row: Mapping[str, str | None]) -> VesselIdentity:
    return VesselIdentity(
        vessel_name=_cell(row, VESSEL_NAME_COLUMN),
        cargo_class=classify_quantity_unit(_cell(row, QUANTITY_UNIT_COLUMN)),
        registration_country=_cell(row, REGISTRATION_COUNTRY_COLUMN),
        carrier_name=_cell(row, CARRIER_NAME_COLUMN),
        carrier_code=_cell(row, CARRIER_CODE_COLUMN),
    )


def normalize_manifest_rows(rows: Iterable[Mapping[str, str | None]]) -> Iterator[VesselIdentity]:
    for row in rows:
        yield normalize_manifest_row(row)


def _cell(row: Mapping[str, str | None], column: str) -> str:
    # csv.DictReader fills short rows with None
    return row.get(column) or ""
