"""Full-screen REPL buffer.

Usage:
    bufrepl open

Keys:
    Enter           evaluate the current line (or selected lines);
                    incomplete lines just insert a newline
    Ctrl-Space      complete the symbol before the cursor
    Ctrl-Up/Ctrl-P  previous history entry (moves the popup when shown)
    Ctrl-Down/Ctrl-N next history entry (moves the popup when shown)
    Escape          close the completion popup
    Ctrl-Q          quit
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.layout import Float, FloatContainer, HSplit, Layout, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.menus import CompletionsMenu
from prompt_toolkit.lexers import PygmentsLexer
from pygments.lexers.python import PythonLexer

from bufrepl.config import ReplConfig
from bufrepl.core.session import ReplSession
from bufrepl.frontends.tui.buffer_host import BufferHost, buffer_capabilities

logger = logging.getLogger(__name__)

STATUS_TEXT = " Enter eval | Ctrl-Space complete | Ctrl-P/N history | Ctrl-Q quit "


@dataclass
class ReplApp:
    """prompt_toolkit Application hosting one REPL session.

    Attributes:
        config: Formatting configuration.
        host_globals: Scope user code falls back to (default: __main__ globals).
    """

    config: ReplConfig = field(default_factory=ReplConfig.from_env)
    host_globals: Mapping[str, Any] | None = None

    host: BufferHost = field(init=False)
    session: ReplSession = field(init=False)

    def __post_init__(self) -> None:
        if self.host_globals is None:
            self.host_globals = vars(sys.modules["__main__"])

        self.host = BufferHost(Buffer(multiline=True, name="repl"))
        self.session = ReplSession(
            self.host,
            self.config,
            host_globals=self.host_globals,
            surface=buffer_capabilities(self.host.buffer),
        )
        self.session.open()

        self.kb = self._create_key_bindings()
        self.layout = self._create_layout()
        self.app: Application[None] = Application(
            layout=self.layout,
            key_bindings=self.kb,
            full_screen=True,
        )
        # User code can stop the REPL with app.exit()
        self.session.namespace["app"] = self.app

    def run(self) -> None:
        """Run until Ctrl-Q."""
        self.app.run()

    def handle_enter(self) -> None:
        """Accept the popup selection, evaluate, or insert a continuation newline."""
        if self.host.is_completion_list_active():
            self.host.accept_completion()
            return
        if not self.session.commit():
            self.host.insert_newline()

    def _create_layout(self) -> Layout:
        body = Window(
            BufferControl(
                buffer=self.host.buffer,
                lexer=PygmentsLexer(PythonLexer),
            ),
            wrap_lines=False,
        )
        status = Window(
            FormattedTextControl(STATUS_TEXT),
            height=1,
            style="reverse",
        )
        root = FloatContainer(
            content=HSplit([body, status]),
            floats=[
                Float(
                    xcursor=True,
                    ycursor=True,
                    content=CompletionsMenu(max_height=12, scroll_offset=1),
                )
            ],
        )
        return Layout(root, focused_element=body)

    def _create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        popup_active = Condition(self.host.is_completion_list_active)

        @kb.add("enter")
        def _(event: KeyPressEvent) -> None:
            self.handle_enter()

        @kb.add("c-space")
        def _(event: KeyPressEvent) -> None:
            self.session.request_completion()

        @kb.add("c-up")
        @kb.add("c-p")
        def _(event: KeyPressEvent) -> None:
            self.session.history_prev()

        @kb.add("c-down")
        @kb.add("c-n")
        def _(event: KeyPressEvent) -> None:
            self.session.history_next()

        @kb.add("escape", filter=popup_active, eager=True)
        def _(event: KeyPressEvent) -> None:
            self.host.cancel_completion()

        @kb.add("c-q")
        def _(event: KeyPressEvent) -> None:
            event.app.exit()

        return kb
