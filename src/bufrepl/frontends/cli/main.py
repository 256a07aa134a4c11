"""CLI entry point."""

from __future__ import annotations

import sys


def build_cli():
    """Build the rich-click command group."""
    import rich_click as click

    from bufrepl import __version__
    from bufrepl.config import ReplConfig
    from bufrepl.errors import ConfigError
    from bufrepl.logging_config import configure_logging

    click.rich_click.USE_RICH_MARKUP = True
    click.rich_click.USE_MARKDOWN = True
    click.rich_click.SHOW_ARGUMENTS = True
    click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
    click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
    click.rich_click.ERRORS_SUGGESTION = "Try running '--help' for more information."
    click.rich_click.ERRORS_EPILOGUE = ""
    click.rich_click.MAX_WIDTH = 100

    def load_config(edge_column: int | None, tab_width: int | None) -> ReplConfig:
        try:
            return ReplConfig.from_env().with_overrides(edge_column, tab_width)
        except ConfigError as e:
            raise click.UsageError(str(e)) from e

    @click.group()
    @click.version_option(version=__version__, prog_name="bufrepl")
    def cli():
        """bufrepl - a Python REPL inside a text buffer.

        Type code anywhere in the buffer and press **Enter** to evaluate the
        line. Lines that do not compile on their own become continuation
        lines; select the finished block and press **Enter** to run it.
        """
        pass

    @cli.command(name="open")
    @click.option(
        "--edge-column",
        type=int,
        default=None,
        help="Wrap mapping results wider than this (0 = never)",
    )
    @click.option("--tab-width", type=int, default=None, help="Indent for wrapped mapping entries")
    @click.option("--log-file", default=None, help="Write logs to this file")
    @click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")
    def open_(
        edge_column: int | None,
        tab_width: int | None,
        log_file: str | None,
        log_level: str | None,
    ):
        """Open a full-screen REPL buffer.

        **Keys:**

            Enter        evaluate line / selection

            Ctrl-Space   complete symbol

            Ctrl-P/N     cycle history

            Ctrl-Q       quit
        """
        from bufrepl.frontends.tui.app import ReplApp

        # Console logging would draw over the full-screen UI
        configure_logging(level=log_level, file_path=log_file, stream=False)
        config = load_config(edge_column, tab_width)
        ReplApp(config=config).run()

    @cli.command()
    @click.argument("file")
    @click.option(
        "--edge-column",
        type=int,
        default=None,
        help="Wrap mapping results wider than this (0 = never)",
    )
    @click.option("--tab-width", type=int, default=None, help="Indent for wrapped mapping entries")
    @click.option("--plain", is_flag=True, help="Print the transcript without highlighting")
    @click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")
    def run(
        file: str,
        edge_column: int | None,
        tab_width: int | None,
        plain: bool,
        log_level: str | None,
    ):
        """Replay FILE through a REPL buffer and print the transcript.

        **Examples:**

            bufrepl run script.py

            bufrepl run script.py --plain --edge-column 40
        """
        from bufrepl.frontends.cli.file_runner import run_from_file

        configure_logging(level=log_level)
        config = load_config(edge_column, tab_width)
        sys.exit(run_from_file(file, config=config, plain=plain))

    return cli


def main() -> None:
    """Main entry point for the CLI."""
    build_cli()()


if __name__ == "__main__":
    main()
