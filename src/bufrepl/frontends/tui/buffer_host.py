"""`EditorHost` implementation over a prompt_toolkit `Buffer`.

Works without a running Application, which is how the file runner and the
tests drive a REPL. The completion popup is the buffer's `complete_state`,
so any `CompletionsMenu` attached to the buffer's window renders it.
"""

from __future__ import annotations

import inspect

from prompt_toolkit.buffer import Buffer, CompletionState
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from bufrepl.core.host import SurfaceCapabilities


def buffer_capabilities(buffer: Buffer) -> SurfaceCapabilities:
    """Describe a Buffer for completion: its public methods and properties."""
    methods: list[str] = []
    properties: list[str] = []
    constants: list[str] = []
    for name, member in inspect.getmembers(type(buffer)):
        if name.startswith("_"):
            continue
        if isinstance(member, property):
            properties.append(name)
        elif name.isupper():
            constants.append(name)
        elif callable(member):
            methods.append(name)
    # Plain instance attributes set in __init__ (text handlers, filters, ...)
    properties.extend(name for name in vars(buffer) if not name.startswith("_"))
    return SurfaceCapabilities.from_names(buffer, methods, properties, constants)


class BufferHost:
    """Transcript host backed by a prompt_toolkit Buffer.

    Args:
        buffer: Buffer to drive. A new multi-line buffer by default.
    """

    def __init__(self, buffer: Buffer | None = None):
        self.buffer = buffer or Buffer(multiline=True)

    @property
    def text(self) -> str:
        """Whole transcript."""
        return self.buffer.text

    # Reading

    def get_current_line_text(self) -> str:
        return self.buffer.document.current_line

    def get_selection_range(self) -> tuple[int, int]:
        return self.buffer.document.selection_range()

    def get_text_in_range(self, start: int, end: int) -> str:
        return self.buffer.text[start:end]

    def cursor_position(self) -> int:
        return self.buffer.cursor_position

    def line_from_position(self, position: int) -> int:
        return self.buffer.document.translate_index_to_position(position)[0]

    def position_from_line(self, line: int) -> int:
        doc = self.buffer.document
        if line >= doc.line_count:
            return len(doc.text)
        return doc.translate_row_col_to_index(line, 0)

    def column_from_position(self, position: int) -> int:
        return self.buffer.document.translate_index_to_position(position)[1]

    # Editing

    def insert_text(self, text: str) -> None:
        self.buffer.insert_text(text)

    def insert_newline(self) -> None:
        self.buffer.newline(copy_margin=False)

    def delete_current_line(self) -> None:
        doc = self.buffer.document
        start = doc.cursor_position + doc.get_start_of_line_position()
        end = doc.cursor_position + doc.get_end_of_line_position()
        self.buffer.document = Document(doc.text[:start] + doc.text[end:], start)

    def delete_char_before_cursor(self) -> None:
        self.buffer.delete_before_cursor(1)

    def move_cursor_to_line_end(self, line: int) -> None:
        self.buffer.exit_selection()
        doc = self.buffer.document
        line = max(0, min(line, doc.line_count - 1))
        self.buffer.cursor_position = doc.translate_row_col_to_index(line, len(doc.lines[line]))

    def select(self, start: int, end: int) -> None:
        """Select text from start (anchor) to end (cursor)."""
        self.buffer.exit_selection()
        self.buffer.cursor_position = start
        self.buffer.start_selection()
        self.buffer.cursor_position = end

    # Completion popup

    def show_completion_list(self, prefix_length: int, candidates: list[str]) -> None:
        completions = [Completion(text=name, start_position=-prefix_length) for name in candidates]
        self.buffer.complete_state = CompletionState(
            original_document=self.buffer.document,
            completions=completions,
        )

    def is_completion_list_active(self) -> bool:
        return self.buffer.complete_state is not None

    def select_previous_completion(self) -> None:
        self.buffer.complete_previous()

    def select_next_completion(self) -> None:
        self.buffer.complete_next()

    def accept_completion(self) -> None:
        """Keep the highlighted candidate (the first one if none is) and close the popup."""
        state = self.buffer.complete_state
        if state is None:
            return
        if state.complete_index is None and state.completions:
            self.buffer.go_to_completion(0)
        self.buffer.complete_state = None

    def cancel_completion(self) -> None:
        self.buffer.cancel_completion()
