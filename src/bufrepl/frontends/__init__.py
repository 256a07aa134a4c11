"""Frontends - user interfaces for bufrepl (TUI buffer, CLI)."""
