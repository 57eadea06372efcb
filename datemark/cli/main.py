"""
FILE: datemark/cli/main.py
PURPOSE: Typer-based CLI for one-shot date formatting commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - help() - Show command list and usage
  - repl() - Launch interactive REPL
  - fmt() - Format a date with a token pattern
  - fields() - Show every token value for a date
  - tokens() - List supported tokens
  - ago() - Relative label with clock time
  - day() - Day-only relative label
  - clock() - Seconds to HH:mm:ss
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output, logging handler)
  - datemark.core (formatter, relative, settings)
  - datemark.repl (interactive mode)
NOTES:
  - Data commands support --json and --raw flags
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
  - --verbose turns on debug logging through RichHandler
"""

import sys
import logging

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

import typer
from rich.console import Console
from rich.logging import RichHandler

# Typer app setup
app = typer.Typer(
    name="datemark",
    help="Token-pattern date formatting and relative time labels",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"


def configure_logging(verbose: bool) -> None:
    """Route library debug logging to stderr through rich."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_path=False)],
    )


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Default callback - launches REPL when no command is specified.

    If a subcommand is invoked, this only configures logging.
    If no subcommand is invoked (just 'datemark'), launch the REPL.
    """
    configure_logging(verbose)

    if ctx.invoked_subcommand is None:
        # No command specified, launch REPL
        from ..repl import main as repl_main
        try:
            repl_main()
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    # System commands
    version,
    help,
    repl,
    # Formatting commands
    fmt,
    fields,
    tokens,
    # Relative time commands
    ago,
    day,
    clock,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
