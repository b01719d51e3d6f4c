"""Command-line interface for awesomelib."""
