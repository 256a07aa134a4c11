"""bufrepl - a Python read-eval-print loop that lives in a text buffer.

Type code anywhere in the buffer, press Enter to evaluate the line, and
the result is appended inline. Lines that do not compile on their own are
continuation lines; select the finished block and press Enter to run it.

Layers:
    core/       Evaluation engine (sandbox, evaluator, formatter, history,
                completion) and the EditorHost protocol it drives
    frontends/  prompt_toolkit buffer host and TUI, rich-click CLI

Quick Start (headless):
    >>> from bufrepl import BufferHost, ReplSession, ReplConfig
    >>> host = BufferHost()
    >>> session = ReplSession(host, ReplConfig())
    >>> host.insert_text("1 + 1")
    >>> session.commit()
    True
    >>> host.text
    '1 + 1\\n--> 2\\n'
"""

__version__ = "0.1.0"

from bufrepl.config import ReplConfig
from bufrepl.core import (
    CompletionEngine,
    EditorHost,
    EvalOutcome,
    Evaluator,
    HistoryLog,
    OutcomeKind,
    ReplSession,
    ResultFormatter,
    SandboxNamespace,
    SurfaceCapabilities,
)
from bufrepl.errors import CompletionResolutionError, ConfigError, ReplError
from bufrepl.frontends.tui.buffer_host import BufferHost

__all__ = [
    "__version__",
    "BufferHost",
    "CompletionEngine",
    "CompletionResolutionError",
    "ConfigError",
    "EditorHost",
    "EvalOutcome",
    "Evaluator",
    "HistoryLog",
    "OutcomeKind",
    "ReplConfig",
    "ReplError",
    "ReplSession",
    "ResultFormatter",
    "SandboxNamespace",
    "SurfaceCapabilities",
]
