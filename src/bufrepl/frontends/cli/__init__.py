"""Command-line interface for bufrepl."""
