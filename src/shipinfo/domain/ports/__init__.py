"""Domain ports implemented by adapters."""

from __future__ import annotations

from .lookup import LookupReply, LookupTransportError, VesselLookupClient

__all__ = ["LookupReply", "LookupTransportError", "VesselLookupClient"]
