"""bufrepl error types."""

from __future__ import annotations


class ReplError(Exception):
    """Base error for bufrepl operations."""


class ConfigError(ReplError):
    """Invalid configuration value.

    Raised when an environment variable or CLI option cannot be turned
    into a valid setting (non-integer or negative widths).
    """


class CompletionResolutionError(ReplError):
    """A completion symbol path could not be resolved in the sandbox.

    Never surfaced to the user: the completion engine catches it and
    offers no candidates.
    """
