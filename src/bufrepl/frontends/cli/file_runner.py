"""Replay a Python file through a headless REPL buffer.

Each top-level statement is typed into the buffer and committed the way a
user would: single-line statements with Enter on the line, multi-line
statements by selecting their lines first. The resulting transcript is
printed.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from bufrepl.config import ReplConfig
from bufrepl.core.session import ReplSession
from bufrepl.frontends.tui.buffer_host import BufferHost, buffer_capabilities

logger = logging.getLogger(__name__)


def split_statements(source: str) -> list[str]:
    """Split module source into top-level statement snippets.

    Raises:
        SyntaxError: If the source does not parse.
    """
    tree = ast.parse(source)
    lines = source.splitlines()
    spans: list[list[int]] = []
    for node in tree.body:
        # Decorators sit above the node's own line number
        first = min([node.lineno] + [d.lineno for d in getattr(node, "decorator_list", [])])
        last = node.end_lineno or node.lineno
        if spans and first <= spans[-1][1]:
            # Several statements share a line ("a = 1; b = 2")
            spans[-1][1] = max(spans[-1][1], last)
        else:
            spans.append([first, last])
    return ["\n".join(lines[first - 1 : last]) for first, last in spans]


def replay(snippets: list[str], config: ReplConfig | None = None) -> str:
    """Commit snippets one by one into a fresh REPL buffer.

    Returns:
        The transcript text.
    """
    host = BufferHost()
    session = ReplSession(
        host,
        config or ReplConfig(),
        host_globals={"__name__": "__bufrepl__"},
        surface=buffer_capabilities(host.buffer),
    )
    session.open()

    for snippet in snippets:
        start = host.cursor_position()
        host.insert_text(snippet)
        if "\n" in snippet:
            host.select(start, host.cursor_position())
        if not session.commit():
            # A single line that does not compile on its own: report it
            host.select(start, host.cursor_position())
            session.commit()
        logger.debug("replayed snippet %d", len(session.history))

    return host.text


def run_from_file(
    filepath: str,
    config: ReplConfig | None = None,
    plain: bool = False,
    console: Console | None = None,
) -> int:
    """Replay a file and print its transcript.

    Args:
        filepath: Python file to replay.
        config: Formatting configuration.
        plain: Print raw text instead of syntax-highlighted output.
        console: Rich console to print to.

    Returns:
        Process exit code.
    """
    console = console or Console()
    path = Path(filepath)

    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        console.print(f"Error: File not found: {filepath}", markup=False, soft_wrap=True)
        return 1

    try:
        snippets = split_statements(source)
    except SyntaxError as e:
        console.print(f"Error: {filepath}: SyntaxError: {e}", markup=False, soft_wrap=True)
        return 1

    transcript = replay(snippets, config)
    if plain:
        console.print(transcript, markup=False, highlight=False, soft_wrap=True, end="")
    else:
        console.print(Syntax(transcript, "python", theme="ansi_dark", word_wrap=False))
    return 0
