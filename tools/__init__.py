"""Command-line tools for the solar system simulation."""
