"""Host editor abstraction.

The REPL engine never touches a concrete editor. It talks to an
`EditorHost`, which reads and edits the transcript buffer and shows the
completion popup. Positions are 0-based character offsets and line
indices are 0-based.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol


class EditorHost(Protocol):
    """Operations the REPL engine needs from the editor."""

    def get_current_line_text(self) -> str:
        """Text of the line holding the cursor (no line ending)."""
        ...

    def get_selection_range(self) -> tuple[int, int]:
        """(start, end) of the selection; start == end when nothing is selected."""
        ...

    def get_text_in_range(self, start: int, end: int) -> str:
        """Buffer text between two positions."""
        ...

    def cursor_position(self) -> int:
        """Cursor offset."""
        ...

    def line_from_position(self, position: int) -> int:
        """Line index containing a position."""
        ...

    def position_from_line(self, line: int) -> int:
        """Offset of the start of a line (end of buffer past the last line)."""
        ...

    def column_from_position(self, position: int) -> int:
        """Column of a position within its line."""
        ...

    def insert_text(self, text: str) -> None:
        """Insert text at the cursor and move the cursor after it."""
        ...

    def insert_newline(self) -> None:
        """Insert a line break at the cursor."""
        ...

    def delete_current_line(self) -> None:
        """Clear the cursor's line, leaving the cursor at its start."""
        ...

    def delete_char_before_cursor(self) -> None:
        """Delete one character before the cursor."""
        ...

    def move_cursor_to_line_end(self, line: int) -> None:
        """Drop any selection and put the cursor at the end of a line."""
        ...

    def show_completion_list(self, prefix_length: int, candidates: list[str]) -> None:
        """Show pre-sorted candidates anchored prefix_length chars before the cursor."""
        ...

    def is_completion_list_active(self) -> bool:
        """True while the completion popup is shown."""
        ...

    def select_previous_completion(self) -> None:
        """Move the popup selection up."""
        ...

    def select_next_completion(self) -> None:
        """Move the popup selection down."""
        ...


@dataclass(frozen=True)
class SurfaceCapabilities:
    """Enumerable shape of the host's primary editing object.

    Native editor objects are not fully introspectable, so completion
    asks this description instead of the live object.

    Attributes:
        surface: The live object exposed to user code.
        methods: Names completed after the method operator.
        properties: Names completed after member access.
        constants: Names completed after member access.
    """

    surface: Any
    methods: frozenset[str] = frozenset()
    properties: frozenset[str] = frozenset()
    constants: frozenset[str] = frozenset()

    @classmethod
    def from_names(
        cls,
        surface: Any,
        methods: Iterable[str] = (),
        properties: Iterable[str] = (),
        constants: Iterable[str] = (),
    ) -> SurfaceCapabilities:
        return cls(surface, frozenset(methods), frozenset(properties), frozenset(constants))

    def member_names(self) -> frozenset[str]:
        """Names offered after `.` (properties and constants)."""
        return self.properties | self.constants
