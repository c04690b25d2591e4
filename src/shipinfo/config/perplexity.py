"""Perplexity API configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_or_default, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

PERPLEXITY_BASE_URL = "https://api.perplexity.ai"
PERPLEXITY_CHAT_COMPLETIONS_PATH = "/chat/completions"
PERPLEXITY_TIMEOUT_SECONDS = 120.0
DEFAULT_PERPLEXITY_MODEL = "sonar-pro"
DEFAULT_TEMPERATURE = 0.8
DEFAULT_SEARCH_CONTEXT_SIZE = "medium"

# Usage policy of the lookup service; every POST counts, retries of a vessel included.
REQUESTS_PER_MINUTE = 50


@dataclass(frozen=True, slots=True)
class PerplexityConfig:
    """Holds Perplexity API configuration values."""

    api_key: str
    resilience: ResilienceConfig
    model: str = DEFAULT_PERPLEXITY_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    search_context_size: str = DEFAULT_SEARCH_CONTEXT_SIZE


def build_perplexity_resilience(api_key: str) -> ResilienceConfig:
    ratelimit = RateLimit.per_minute(REQUESTS_PER_MINUTE)
    return ResilienceConfig(
        name="perplexity",
        base_url=PERPLEXITY_BASE_URL,
        timeout_seconds=PERPLEXITY_TIMEOUT_SECONDS,
        ratelimit=ratelimit,
        retry=RetryPolicy(total=2, backoff_factor=ratelimit.per_seconds, backoff_jitter=0.0),
        default_headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
    )


def get_perplexity_config(*, resilience: ResilienceConfig | None = None) -> PerplexityConfig:
    values = require_env_vars(("PERPLEXITY_API_KEY",))
    api_key = values["PERPLEXITY_API_KEY"]
    return PerplexityConfig(
        api_key=api_key,
        model=env_or_default("PERPLEXITY_MODEL", DEFAULT_PERPLEXITY_MODEL),
        resilience=resilience or build_perplexity_resilience(api_key),
    )
