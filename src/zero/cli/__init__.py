"""Command-line interface for zero."""
