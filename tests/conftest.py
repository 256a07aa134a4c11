"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from bufrepl.config import ReplConfig
from bufrepl.core.environment import SandboxNamespace
from bufrepl.core.session import ReplSession
from bufrepl.frontends.tui.buffer_host import BufferHost


@pytest.fixture
def host() -> BufferHost:
    """Empty headless transcript buffer."""
    return BufferHost()


@pytest.fixture
def config() -> ReplConfig:
    """Narrow edge column so small mappings wrap."""
    return ReplConfig(max_line_width=20, indent_width=2)


@pytest.fixture
def session(host: BufferHost, config: ReplConfig) -> ReplSession:
    """REPL session over the headless buffer with a small host scope."""
    return ReplSession(host, config, host_globals={"host_value": 7})


@pytest.fixture
def namespace() -> SandboxNamespace:
    """Sandbox chained to a host scope holding `host_value`."""
    return SandboxNamespace({"host_value": 7})


@pytest.fixture
def type_and_commit(host: BufferHost, session: ReplSession):
    """Type text at the cursor and press Enter; returns what commit() returned."""

    def _type(text: str) -> bool:
        host.insert_text(text)
        return session.commit()

    return _type
