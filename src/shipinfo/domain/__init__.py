"""Domain layer: value types, ingestion stages and enrichment services."""
