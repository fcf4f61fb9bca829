"""Command-line interface for solayout."""
