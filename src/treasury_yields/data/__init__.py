"""Feed access, ingestion and caching."""
