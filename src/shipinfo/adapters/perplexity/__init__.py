"""Perplexity lookup adapter."""

from __future__ import annotations

from .client import PerplexityClient, build_perplexity_client
from .translator import translate_reply

__all__ = ["PerplexityClient", "build_perplexity_client", "translate_reply"]
