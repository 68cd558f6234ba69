"""Command-line interface for bitsparrow."""
