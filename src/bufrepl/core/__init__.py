"""Core - the REPL evaluation engine.

Nothing in here knows about a concrete editor; everything the engine needs
from one goes through the `EditorHost` protocol.

Architecture:
    environment  Sandbox globals chained to a read-only host scope
    evaluator    Expression-then-statement compilation, continuation detection
    formatter    Marker-prefixed, width-aware result rendering
    history      Snippet log with a movable cursor
    completion   Symbol path resolution and candidate listing
    session      Host key-event handlers wiring the above together
"""

from bufrepl.core.completion import CompletionEngine, parse_completion_request
from bufrepl.core.environment import SandboxNamespace
from bufrepl.core.evaluator import CompiledSnippet, Evaluator
from bufrepl.core.formatter import RESULT_MARKER, ResultFormatter
from bufrepl.core.history import HistoryLog
from bufrepl.core.host import EditorHost, SurfaceCapabilities
from bufrepl.core.session import ReplSession
from bufrepl.core.types import (
    CompletionOperator,
    CompletionRequest,
    EvalOutcome,
    OutcomeKind,
)

__all__ = [
    "RESULT_MARKER",
    "CompiledSnippet",
    "CompletionEngine",
    "CompletionOperator",
    "CompletionRequest",
    "EditorHost",
    "EvalOutcome",
    "Evaluator",
    "HistoryLog",
    "OutcomeKind",
    "ReplSession",
    "ResultFormatter",
    "SandboxNamespace",
    "SurfaceCapabilities",
    "parse_completion_request",
]
