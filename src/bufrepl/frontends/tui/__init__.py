"""prompt_toolkit host: Buffer-backed EditorHost and the full-screen REPL."""

from bufrepl.frontends.tui.buffer_host import BufferHost, buffer_capabilities

__all__ = ["BufferHost", "buffer_capabilities"]
