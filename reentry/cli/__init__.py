"""Command-line interface for Reentry."""
