"""Outbound access to the Treasury interest-rate XML feed."""
