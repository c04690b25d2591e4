"""Adapters for files and external services."""
