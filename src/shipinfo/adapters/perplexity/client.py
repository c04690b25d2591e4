"""HTTP client for the Perplexity chat-completions API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from shipinfo.adapters.http_resilience import ResilientClient
from shipinfo.config.perplexity import PERPLEXITY_CHAT_COMPLETIONS_PATH, get_perplexity_config
from shipinfo.domain.ports.lookup import LookupReply, LookupTransportError, VesselLookupClient

from .prompts import SYSTEM_PROMPT, construction_prompt, vessel_prompt
from .translator import translate_reply

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from shipinfo.config.http_resilience import ResilienceConfig
    from shipinfo.config.perplexity import PerplexityConfig
    from shipinfo.domain.types import VesselIdentity

log = getLogger(__name__)


class PerplexityClient:
    """Vessel lookups against Perplexity over one long-lived HTTP client.

    All lookups made through an instance share its rate limit, so a run should
    use a single instance and close it at the end.
    """

    def __init__(
        self,
        *,
        config: PerplexityConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> PerplexityClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def lookup_vessel(self, vessel: VesselIdentity) -> LookupReply:
        return await self._complete(vessel_prompt(vessel))

    async def lookup_construction(self, vessel_name: str, imo_number: str) -> LookupReply:
        return await self._complete(construction_prompt(vessel_name, imo_number))

    def build_request(self, prompt: str) -> dict[str, object]:
        return {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self._config.temperature,
            "web_search_options": {"search_context_size": self._config.search_context_size},
        }

    async def _complete(self, prompt: str) -> LookupReply:
        client = self._ensure_client()
        try:
            response = await client.post(
                PERPLEXITY_CHAT_COMPLETIONS_PATH,
                json=self.build_request(prompt),
            )
        except httpx.HTTPError as exc:
            raise LookupTransportError(f"{type(exc).__name__}: {exc}") from exc

        if response.is_error:
            log.warning("Perplexity returned HTTP %s", response.status_code)
        return translate_reply(_decode_body(response))

    def _ensure_client(self) -> ResilientClient:
        if self._client is None:
            self._client = self._client_factory(self._config.resilience)
        return self._client


def _decode_body(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return response.text


def build_perplexity_client() -> PerplexityClient:
    return PerplexityClient(config=get_perplexity_config())


if TYPE_CHECKING:
    _client_check: VesselLookupClient = build_perplexity_client()
