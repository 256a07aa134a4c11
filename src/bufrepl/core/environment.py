"""Sandbox global scope for REPL evaluation.

Code submitted to the REPL runs with a `SandboxNamespace` as its globals.
Lookups check the sandbox first, then fall back to a read-only view of the
host's globals. Assignments always land in the sandbox, so user code can
shadow but never modify host names.

    >>> host = {"answer": 42}
    >>> env = SandboxNamespace(host)
    >>> eval("answer + 1", env)
    43
    >>> exec("answer = 0", env)
    >>> host["answer"]
    42
"""

from __future__ import annotations

import builtins
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any


class SandboxNamespace(dict):
    """Mutable globals dict chained to a read-only host scope.

    CPython resolves globals of a dict subclass through `__getitem__`, so
    `__missing__` is consulted for every name the sandbox does not define,
    both at top level and inside functions defined in the sandbox.
    """

    def __init__(self, host_globals: Mapping[str, Any] | None = None, **bindings: Any):
        super().__init__(**bindings)
        self._host = MappingProxyType({} if host_globals is None else host_globals)
        # exec() would otherwise insert the real builtins module lazily
        self.setdefault("__builtins__", builtins)

    @property
    def host(self) -> Mapping[str, Any]:
        """Read-only view of the host globals."""
        return self._host

    def __missing__(self, key: str) -> Any:
        return self._host[key]

    def visible_names(self) -> set[str]:
        """All names resolvable from the root scope."""
        names = {k for k in self._iter_chain() if isinstance(k, str)}
        names.update(dir(builtins))
        return names

    def _iter_chain(self) -> Iterator[Any]:
        yield from self.keys()
        yield from self._host.keys()
