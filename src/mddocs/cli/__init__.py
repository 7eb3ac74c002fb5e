"""Command line interface for mddocs."""
