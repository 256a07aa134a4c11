"""Inline rendering of evaluation outcomes.

Every rendered block starts with the result marker and repeats it after
each line break, so results stay distinguishable from input in the
transcript:

    >>> ResultFormatter().format(EvalOutcome.of_value({"b": 2, "a": 1}))
    '--> {a = 1, b = 2}'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from bufrepl.core.types import EvalOutcome, OutcomeKind

RESULT_MARKER = "--> "

_LINE_BREAK = re.compile(r"(\r?\n)")


def mark_lines(text: str, marker: str = RESULT_MARKER) -> str:
    """Prefix text with the marker and repeat it after every line break."""
    return marker + _LINE_BREAK.sub(lambda m: m.group(1) + marker, text)


def render_mapping(value: Mapping[Any, Any], max_line_width: int = 0, indent_width: int = 4) -> str:
    """Render a mapping as `{k = v, ...}` with entries sorted by key.

    Falls back to one entry per line when the single-line form is longer
    than max_line_width (0 disables the check).
    """
    rendered = sorted((str(k), str(v)) for k, v in value.items())
    entries = [f"{k} = {v}" for k, v in rendered]

    text = "{" + ", ".join(entries) + "}"
    if entries and max_line_width > 0 and len(text) > max_line_width:
        indent = " " * indent_width
        text = "{\n" + indent + (",\n" + indent).join(entries) + "\n}"
    return text


class ResultFormatter:
    """Turns outcomes into marker-prefixed transcript text.

    Args:
        max_line_width: Edge column for mapping results (0 = never wrap).
        indent_width: Indent for wrapped mapping entries.
    """

    def __init__(self, max_line_width: int = 0, indent_width: int = 4):
        if max_line_width < 0 or indent_width < 0:
            raise ValueError("max_line_width and indent_width must be >= 0")
        self.max_line_width = max_line_width
        self.indent_width = indent_width

    def format(
        self,
        outcome: EvalOutcome,
        max_line_width: int | None = None,
        indent_width: int | None = None,
    ) -> str | None:
        """Render an outcome, or None when there is nothing to show.

        The trailing newline is left to the host.
        """
        if outcome.kind is OutcomeKind.ERROR:
            return mark_lines(outcome.error or "")
        if outcome.kind is not OutcomeKind.VALUE:
            return None

        width = self.max_line_width if max_line_width is None else max_line_width
        indent = self.indent_width if indent_width is None else indent_width

        value = outcome.value
        if isinstance(value, Mapping):
            text = render_mapping(value, width, indent)
        else:
            text = str(value)
        return mark_lines(text)
