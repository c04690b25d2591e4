"""Application configuration helpers."""

from __future__ import annotations

from .env import env_or_default, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, resolve_log_level
from .perplexity import PerplexityConfig, build_perplexity_resilience, get_perplexity_config

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "PerplexityConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "build_perplexity_resilience",
    "configure_logging",
    "env_or_default",
    "get_perplexity_config",
    "require_env_vars",
    "resolve_log_level",
]
