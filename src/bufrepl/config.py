"""REPL configuration.

Environment Variables:
    BUFREPL_EDGE_COLUMN: Width after which mappings are printed one entry
        per line (0 disables wrapping).
    BUFREPL_TAB_WIDTH: Indent used for wrapped mapping entries.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from bufrepl.errors import ConfigError

EDGE_COLUMN_ENV = "BUFREPL_EDGE_COLUMN"
TAB_WIDTH_ENV = "BUFREPL_TAB_WIDTH"


@dataclass(frozen=True)
class ReplConfig:
    """REPL configuration.

    Attributes:
        max_line_width: Edge column for mapping results (0 = never wrap).
        indent_width: Spaces per indent level in wrapped results.
        title: Header written on the first line of a new REPL buffer.
    """

    max_line_width: int = 100
    indent_width: int = 4
    title: str = "Python REPL"

    def __post_init__(self) -> None:
        if self.max_line_width < 0:
            raise ConfigError(f"max_line_width must be >= 0, got {self.max_line_width}")
        if self.indent_width < 0:
            raise ConfigError(f"indent_width must be >= 0, got {self.indent_width}")

    @classmethod
    def from_env(cls) -> ReplConfig:
        """Build a config from BUFREPL_* environment variables.

        Raises:
            ConfigError: If a variable is not a non-negative integer.
        """
        config = cls()
        edge = _read_int(EDGE_COLUMN_ENV)
        if edge is not None:
            config = replace(config, max_line_width=edge)
        tab = _read_int(TAB_WIDTH_ENV)
        if tab is not None:
            config = replace(config, indent_width=tab)
        return config

    def with_overrides(
        self,
        max_line_width: int | None = None,
        indent_width: int | None = None,
    ) -> ReplConfig:
        """Return a copy with any non-None values replaced (CLI flags)."""
        config = self
        if max_line_width is not None:
            config = replace(config, max_line_width=max_line_width)
        if indent_width is not None:
            config = replace(config, indent_width=indent_width)
        return config


def _read_int(name: str) -> int | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e
