"""Command line interface for Prompt Manager."""
