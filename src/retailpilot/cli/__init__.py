"""Command line interface for retailpilot."""
