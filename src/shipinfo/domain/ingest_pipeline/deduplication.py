"""Vessel deduplication."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from shipinfo.domain.types import VesselIdentity


def unique_vessels(vessels: Iterable[VesselIdentity]) -> Iterator[VesselIdentity]:
    """Yield the first occurrence of every non-empty vessel name, in input order.

    Only the names seen so far are held in memory, so the input may be a stream.
    """

    seen: set[str] = set()
    for vessel in vessels:
        name = vessel.vessel_name
        if not name or name in seen:
            continue
        seen.add(name)
        yield vessel
