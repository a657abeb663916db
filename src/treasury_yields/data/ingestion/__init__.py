"""Async ingestion pipelines."""
