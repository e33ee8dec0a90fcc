"""Static configuration tables."""
