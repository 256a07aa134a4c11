"""In-memory command history for one REPL session.

Entries are kept in evaluation order and never removed. A cursor tracks
the entry currently shown in the transcript; `len(entries)` means "not
browsing". Navigation stops at the first and last entries rather than
wrapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class HistoryLog:
    """Append-only snippet log with a movable cursor.

    Example:
        >>> log = HistoryLog()
        >>> log.record("x = 1")
        >>> log.record("x")
        >>> log.prev()
        'x'
        >>> log.prev()
        'x = 1'
        >>> log.prev() is None
        True
        >>> log.next()
        'x'
    """

    entries: list[str] = field(default_factory=list)
    pos: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.pos = len(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def browsing(self) -> bool:
        """True while the cursor sits on an entry."""
        return self.pos < len(self.entries)

    def record(self, snippet: str) -> None:
        """Append a snippet and stop browsing."""
        self.entries.append(snippet)
        self.pos = len(self.entries)

    def current(self) -> str:
        """The entry under the cursor, or "" when not browsing."""
        return self.entries[self.pos] if self.browsing else ""

    def lines_to_erase(self) -> int:
        """Transcript lines occupied by the entry under the cursor."""
        return self.current().count("\n") + 1

    def prev(self) -> str | None:
        """Move to the previous entry and return it (None at the first)."""
        if self.pos <= 0:
            return None
        self.pos -= 1
        logger.debug("history prev: pos=%d/%d", self.pos, len(self.entries))
        return self.entries[self.pos]

    def next(self) -> str | None:
        """Move to the next entry and return it (None at the last)."""
        if self.pos >= len(self.entries) - 1:
            return None
        self.pos += 1
        logger.debug("history next: pos=%d/%d", self.pos, len(self.entries))
        return self.entries[self.pos]
