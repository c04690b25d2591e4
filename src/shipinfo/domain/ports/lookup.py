"""Port for the external knowledge-lookup service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shipinfo.domain.types import VesselIdentity


class LookupTransportError(RuntimeError):
    """Raised when a lookup request could not be completed at all."""


@dataclass(frozen=True, slots=True)
class LookupReply:
    """Outcome of one lookup request.

    ``content`` is the assistant text of the top choice, or ``None`` when the
    response body did not have the expected shape. ``body`` is the response
    body rendered as text for diagnostics.
    """

    content: str | None
    body: str


@runtime_checkable
class VesselLookupClient(Protocol):
    """Async port issuing the primary and IMO-keyed lookups."""

    async def lookup_vessel(self, vessel: VesselIdentity) -> LookupReply: ...

    async def lookup_construction(self, vessel_name: str, imo_number: str) -> LookupReply: ...


__all__ = ["LookupReply", "LookupTransportError", "VesselLookupClient"]
