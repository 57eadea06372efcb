"""
FILE: datemark/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import typer
from rich.markup import escape

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__


@app.command()
def version():
    """Show datemark version."""
    console.print(f"datemark v{__version__}")


@app.command()
def help():
    """Show available commands and usage."""
    console.print("\n[bold cyan]datemark[/bold cyan] - Token-pattern date formatting and relative time labels\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print("  datemark [command] [options]")
    console.print("  datemark                    [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("fmt", "Format a date with a token pattern", 'datemark fmt <date> ["yyyy-MM-dd HH:mm"]'),
        ("fields", "Show every token value for a date", "datemark fields <date>"),
        ("tokens", "List supported format tokens", "datemark tokens"),
        ("ago", "Relative label with clock time", "datemark ago <date> [--locale zh]"),
        ("day", "Day-only relative label", "datemark day <date> [--locale zh]"),
        ("clock", "Seconds to HH:mm:ss", "datemark clock <seconds>"),
        ("repl", "Launch interactive REPL", "datemark repl"),
        ("version", "Show version", "datemark version"),
        ("help", "Show this help message", "datemark help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{escape(example)}[/dim]\n")

    console.print("[bold]Global Options:[/bold]")
    console.print("  [yellow]--verbose[/yellow] Show debug logging")
    console.print("  [yellow]--json[/yellow]    Output as JSON (for scripting)")
    console.print("  [yellow]--raw[/yellow]     Plain text output (no colors)")
    console.print("  [yellow]--help[/yellow]    Show detailed help for a command\n")

    console.print("[bold]Environment:[/bold]")
    console.print("  [yellow]DATEMARK_LOCALE[/yellow]   Default label language (en, zh)")
    console.print("  [yellow]DATEMARK_PATTERN[/yellow]  Default pattern for fmt\n")

    console.print("[bold]Examples:[/bold]")
    console.print("  datemark                                   # Launch REPL (default)")
    console.print("  datemark fmt 2018-01-30                    # 2018-01-30")
    console.print('  datemark fmt "2018-01-30 14:05" "hh:mm"    # PM 02:05')
    console.print("  datemark fmt 1517241600000 yyyy/M/d        # epoch milliseconds")
    console.print('  datemark ago "2018-12-10 18:31:37"')
    console.print("  datemark day 2018-12-10 --locale zh")
    console.print("  datemark clock 60                          # 00:01:00")
    console.print("  datemark fields 2018-07-04 --json\n")


@app.command()
def repl():
    """
    Launch interactive REPL mode.

    The REPL provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - Session locale and default pattern
    - Exit with Ctrl+D or type 'exit'

    Example:
        datemark repl
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        repl_main()
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
