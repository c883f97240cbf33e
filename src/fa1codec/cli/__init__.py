"""Command-line interface for fa1codec."""
