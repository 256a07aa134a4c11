"""Pure data types for bufrepl.core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class OutcomeKind(Enum):
    """Classification of one evaluation attempt."""

    VALUE = auto()  # Expression produced a value
    NO_VALUE = auto()  # Ran fine, nothing to show
    INCOMPLETE = auto()  # Needs more lines (continuation)
    ERROR = auto()  # Compile error in a selection, or runtime exception


@dataclass(frozen=True)
class EvalOutcome:
    """Result of evaluating one snippet.

    Attributes:
        kind: What happened.
        value: The expression value (VALUE only).
        error: Error text (ERROR only), e.g. "ZeroDivisionError: division by zero".
    """

    kind: OutcomeKind
    value: Any = None
    error: str | None = None

    @classmethod
    def of_value(cls, value: Any) -> EvalOutcome:
        return cls(OutcomeKind.VALUE, value=value)

    @classmethod
    def no_value(cls) -> EvalOutcome:
        return cls(OutcomeKind.NO_VALUE)

    @classmethod
    def incomplete(cls) -> EvalOutcome:
        return cls(OutcomeKind.INCOMPLETE)

    @classmethod
    def failure(cls, error: str) -> EvalOutcome:
        return cls(OutcomeKind.ERROR, error=error)


class CompletionOperator(Enum):
    """Operator between the symbol path and the partial identifier."""

    MEMBER = "."  # obj.attr - every attribute
    METHOD = ":"  # obj:meth - callables only
    NONE = ""  # bare identifier


@dataclass(frozen=True)
class CompletionRequest:
    """Parsed trailing symbol of the text before the cursor.

    Attributes:
        symbol_path: Dotted path to resolve ("" for root scope).
        operator: Member, method or none.
        partial: Identifier prefix being typed.
    """

    symbol_path: str
    operator: CompletionOperator
    partial: str
