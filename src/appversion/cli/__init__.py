"""Command-line interface for appversion."""
