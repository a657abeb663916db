"""Curve model, term tables, canonical ordering and feed extraction."""
