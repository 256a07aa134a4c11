"""Snippet evaluation.

A snippet is compiled as an expression first so bare expressions show
their value the way an interactive prompt does, and as a statement block
second so assignments, imports and compound statements work too. When
neither compiles and the snippet is a single uncommitted line, it is
reported as incomplete: the host then inserts a plain newline and the user
keeps typing the rest of the construct.

Compiling and running are separate steps so the host can move the cursor
below the input before any `print` output lands in the transcript.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import CodeType

from bufrepl.core.environment import SandboxNamespace
from bufrepl.core.types import EvalOutcome

logger = logging.getLogger(__name__)

REPL_FILENAME = "<repl>"


def describe_exception(exc: BaseException) -> str:
    """Render an exception as "<Type>: <message>"."""
    message = str(exc)
    name = type(exc).__name__
    return f"{name}: {message}" if message else name


@dataclass(frozen=True)
class CompiledSnippet:
    """A snippet after the compile step.

    Attributes:
        source: Original text.
        code: Code object, or None if neither form compiled.
        is_expression: True when compiled in expression form.
        error: Statement-form compile error when code is None.
    """

    source: str
    code: CodeType | None
    is_expression: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.code is not None


class Evaluator:
    """Compiles and runs snippets against a sandbox namespace.

    Args:
        namespace: Globals the snippets run in. Bindings persist across calls.
        filename: Filename reported in tracebacks and syntax errors.
    """

    def __init__(self, namespace: SandboxNamespace, filename: str = REPL_FILENAME):
        self.namespace = namespace
        self.filename = filename

    def evaluate(self, source: str, from_selection: bool = False) -> EvalOutcome:
        """Compile and run a snippet.

        Args:
            source: Snippet text (may span lines).
            from_selection: True when the user explicitly selected the lines,
                in which case syntax errors are reported instead of being
                treated as a continuation.
        """
        compiled = self.compile(source)
        if not compiled.ok and not from_selection:
            logger.debug("incomplete input: %r", source)
            return EvalOutcome.incomplete()
        return self.run(compiled)

    def compile(self, source: str) -> CompiledSnippet:
        """Compile as an expression, falling back to a statement block."""
        try:
            code = compile(source, self.filename, "eval", dont_inherit=True)
            return CompiledSnippet(source, code, is_expression=True)
        except (SyntaxError, ValueError):
            pass

        try:
            code = compile(source, self.filename, "exec", dont_inherit=True)
            return CompiledSnippet(source, code)
        except (SyntaxError, ValueError) as e:
            return CompiledSnippet(source, None, error=describe_exception(e))

    def run(self, compiled: CompiledSnippet) -> EvalOutcome:
        """Execute a compiled snippet under a protected call.

        Exceptions raised by user code (including SystemExit) become ERROR
        outcomes; bindings made before the exception are kept.
        """
        if compiled.code is None:
            logger.debug("compile error: %s", compiled.error)
            return EvalOutcome.failure(compiled.error or "SyntaxError")

        try:
            result = eval(compiled.code, self.namespace)  # noqa: S307
        except (Exception, SystemExit) as e:
            logger.debug("runtime error: %s", describe_exception(e))
            return EvalOutcome.failure(describe_exception(e))

        if compiled.is_expression and result is not None:
            logger.debug("evaluated to %s", type(result).__name__)
            return EvalOutcome.of_value(result)
        return EvalOutcome.no_value()
