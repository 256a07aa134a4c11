"""REPL session: the handlers a host editor binds to its keys.

A session owns one sandbox namespace, one history log and the
evaluator/formatter/completion components, and drives an `EditorHost`:

    commit()             Enter - evaluate the current line or selected lines
    request_completion() show completions for the symbol before the cursor
    history_prev()       replace the shown snippet with the previous one
    history_next()       replace the shown snippet with the next one

Every handler runs synchronously to completion; a long-running snippet
blocks the host until it returns.
"""

from __future__ import annotations

import builtins
import logging
from collections.abc import Mapping
from typing import Any

from bufrepl.config import ReplConfig
from bufrepl.core.completion import CompletionEngine, parse_completion_request
from bufrepl.core.environment import SandboxNamespace
from bufrepl.core.evaluator import Evaluator, describe_exception
from bufrepl.core.formatter import RESULT_MARKER, ResultFormatter
from bufrepl.core.history import HistoryLog
from bufrepl.core.host import EditorHost, SurfaceCapabilities
from bufrepl.core.types import EvalOutcome

logger = logging.getLogger(__name__)


class ReplSession:
    """Evaluation engine bound to one host buffer.

    Args:
        host: Editor collaborator holding the transcript.
        config: Formatting configuration (defaults from the environment).
        host_globals: Scope the sandbox falls back to for lookups.
        surface: Capability description of the editing object exposed to
            user code; bound in the sandbox under surface_name.
        surface_name: Sandbox name for the editing object.
    """

    def __init__(
        self,
        host: EditorHost,
        config: ReplConfig | None = None,
        host_globals: Mapping[str, Any] | None = None,
        surface: SurfaceCapabilities | None = None,
        surface_name: str = "buffer",
    ):
        self.host = host
        self.config = config or ReplConfig.from_env()
        self.namespace = SandboxNamespace(host_globals, print=self._print, repl=self)
        if surface is not None:
            self.namespace[surface_name] = surface.surface

        self.history = HistoryLog()
        self.evaluator = Evaluator(self.namespace)
        self.formatter = ResultFormatter(self.config.max_line_width, self.config.indent_width)
        self.completion = CompletionEngine(self.namespace, surface)

    def open(self) -> None:
        """Write the REPL header line."""
        self.host.insert_text(f"# {self.config.title}")
        self.host.insert_newline()

    def commit(self) -> bool:
        """Evaluate the current line, or the selected lines.

        Returns:
            True if the key was consumed. False means the line is an
            incomplete construct and the host should insert a newline.
        """
        host = self.host
        start, end = host.get_selection_range()
        from_selection = start != end

        if from_selection:
            first, last = host.line_from_position(start), host.line_from_position(end)
            if first < last:
                start = host.position_from_line(first)
                # Extend a partially selected last line to its end
                if host.column_from_position(end) > 0:
                    end = host.position_from_line(last + 1)
            source = host.get_text_in_range(start, end)
            last_line = host.line_from_position(end)
        else:
            source = host.get_current_line_text()
            last_line = host.line_from_position(host.cursor_position())

        compiled = self.evaluator.compile(source)
        if not compiled.ok and not from_selection:
            logger.debug("continuation line: %r", source)
            return False

        host.move_cursor_to_line_end(last_line)
        host.insert_newline()

        outcome = self.evaluator.run(compiled)
        try:
            text = self.formatter.format(outcome)
        except Exception as e:
            # A value's __str__ is user code too
            outcome = EvalOutcome.failure(describe_exception(e))
            text = self.formatter.format(outcome)

        # print(..., end="") may have left a partial output line
        if host.column_from_position(host.cursor_position()) > 0:
            host.insert_newline()
        if text is not None:
            host.insert_text(text)
            host.insert_newline()

        self.history.record(source)
        logger.debug("committed %d line(s): %s", source.count("\n") + 1, outcome.kind.name)
        return True

    def request_completion(self) -> None:
        """Show completion candidates for the symbol before the cursor."""
        host = self.host
        column = host.column_from_position(host.cursor_position())
        text = host.get_current_line_text()[:column]

        request = parse_completion_request(text)
        candidates = self.completion.candidates(request)
        if candidates:
            host.show_completion_list(len(request.partial), candidates)

    def history_prev(self) -> None:
        """Show the previous history entry (or move the completion popup up)."""
        if self.host.is_completion_list_active():
            self.host.select_previous_completion()
            return
        shown_lines = self.history.lines_to_erase()
        snippet = self.history.prev()
        if snippet is not None:
            self._replace_shown(shown_lines, snippet)

    def history_next(self) -> None:
        """Show the next history entry (or move the completion popup down)."""
        if self.host.is_completion_list_active():
            self.host.select_next_completion()
            return
        shown_lines = self.history.lines_to_erase()
        snippet = self.history.next()
        if snippet is not None:
            self._replace_shown(shown_lines, snippet)

    def _replace_shown(self, shown_lines: int, snippet: str) -> None:
        for _ in range(shown_lines - 1):
            self.host.delete_current_line()
            self.host.delete_char_before_cursor()
        self.host.delete_current_line()
        self.host.insert_text(snippet)

    def _print(
        self, *args: Any, sep: str = "\t", end: str = "\n", file: Any = None, flush: bool = False
    ) -> None:
        """`print` as seen by user code: writes straight into the transcript."""
        if file is not None:
            builtins.print(*args, sep=sep, end=end, file=file, flush=flush)
            return
        host = self.host
        text = sep.join(str(arg) for arg in args) + end
        # Only a fresh output line gets the marker; end="" continues the line
        if host.column_from_position(host.cursor_position()) == 0:
            text = RESULT_MARKER + text
        newline = text.endswith("\n")
        if newline:
            text = text[:-1]
        if text:
            host.insert_text(text)
        if newline:
            host.insert_newline()
