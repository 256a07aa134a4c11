"""Symbol completion against the sandbox namespace.

The text before the cursor is split into a symbol path, an optional
operator and the identifier being typed:

    "os.pa"      -> ("os", ".", "pa")     attributes of os
    "buffer:ins" -> ("buffer", ":", "ins") callables of buffer
    "pri"        -> ("", "", "pri")       root-scope names

Resolution failures never reach the user; they just produce no
candidates.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from bufrepl.core.environment import SandboxNamespace
from bufrepl.core.host import SurfaceCapabilities
from bufrepl.core.types import CompletionOperator, CompletionRequest
from bufrepl.errors import CompletionResolutionError

logger = logging.getLogger(__name__)

_TRAILING_SYMBOL = re.compile(r"([\w.]*?)([.:]?)(\w*)$")


def parse_completion_request(text: str) -> CompletionRequest:
    """Split the text before the cursor into a completion request."""
    match = _TRAILING_SYMBOL.search(text)
    # The pattern can always match the empty string at the end
    assert match is not None
    symbol_path, operator, partial = match.groups()
    return CompletionRequest(symbol_path, CompletionOperator(operator), partial)


class CompletionEngine:
    """Resolves partial symbols to sorted candidate names.

    Args:
        namespace: Sandbox the symbol path is evaluated in.
        surface: Capability description of the host's editing object, used
            instead of introspection when a path resolves to that object.
    """

    def __init__(self, namespace: SandboxNamespace, surface: SurfaceCapabilities | None = None):
        self.namespace = namespace
        self.surface = surface

    def complete(self, text_before_cursor: str) -> list[str]:
        """Return sorted candidates for the symbol ending at the cursor."""
        request = parse_completion_request(text_before_cursor)
        return self.candidates(request)

    def candidates(self, request: CompletionRequest) -> list[str]:
        """Return sorted candidates for a parsed request."""
        if request.symbol_path:
            try:
                target = self._resolve(request.symbol_path)
            except CompletionResolutionError as e:
                logger.debug("completion: %s", e)
                return []
            names = self._names_of(target, request.operator)
        else:
            names = self.namespace.visible_names()

        matches = sorted({name for name in names if name.startswith(request.partial)})
        logger.debug(
            "completion: path=%r op=%r partial=%r -> %d candidates",
            request.symbol_path,
            request.operator.value,
            request.partial,
            len(matches),
        )
        return matches

    def _resolve(self, symbol_path: str) -> Any:
        try:
            return eval(symbol_path, self.namespace)  # noqa: S307
        except Exception as e:
            raise CompletionResolutionError(f"cannot resolve {symbol_path!r}: {e}") from e

    def _names_of(self, target: Any, operator: CompletionOperator) -> Iterable[str]:
        if self.surface is not None and target is self.surface.surface:
            if operator is CompletionOperator.METHOD:
                return self.surface.methods
            return self.surface.member_names()

        members = _members(target)
        if operator is CompletionOperator.METHOD:
            return [name for name, value in members.items() if callable(value)]
        return members.keys()


def _members(target: Any) -> dict[str, Any]:
    """Attribute (and string-key, for mappings) name -> value."""
    members: dict[str, Any] = {}
    for name in dir(target):
        try:
            members[name] = getattr(target, name)
        except Exception:
            # Properties may raise; the name is still a valid attribute
            members[name] = None
    if isinstance(target, Mapping):
        for key, value in target.items():
            if isinstance(key, str):
                members.setdefault(key, value)
    return members
