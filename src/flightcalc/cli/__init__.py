"""Command-line interface: argument parsing, JSON output and the entry point."""
