"""Shared helpers used across shipinfo layers."""

from __future__ import annotations

from .storage import DEFAULT_MANIFEST_FILENAME, get_output_path

__all__ = ["DEFAULT_MANIFEST_FILENAME", "get_output_path"]
