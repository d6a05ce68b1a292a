"""Command-line interface for piiscan."""
