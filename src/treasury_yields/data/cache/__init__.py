"""In-memory curve cache."""
