"""
FILE: datemark/repl/commands/formatting.py
PURPOSE: Formatting command handlers for REPL (fmt, fields, tokens, pattern)
"""

from rich.markup import escape

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.formatter import format_date
from ...core.parsing import to_instant
from ...core.exceptions import InvalidDateError
from ...formatting import ResultFormatter


def handle_fmt_command(result: ParseResult) -> None:
    """
    Handle 'fmt' command - format a date with a pattern.

    Usage:
        fmt 2018-01-30
        fmt "2018-01-30 14:05:09" "hh:mm:ss"
        fmt 1517241600000 yyyy/M/d --json
    """
    if not result.args:
        console.print("[red]Error:[/red] Missing date")
        console.print('[dim]Usage: fmt <date> ["pattern"][/dim]')
        return

    source = result.args[0]
    pattern = result.args[1] if len(result.args) > 1 else repl_context.pattern

    if not source:
        console.print(f"[red]Error:[/red] Invalid date: {source!r}")
        return

    try:
        formatted = format_date(source, pattern, strict=True)
    except InvalidDateError as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    if result.flags.get("json"):
        console.print(ResultFormatter.result_to_json("fmt", source, formatted, pattern=pattern))
    else:
        console.print(formatted, markup=False, highlight=False)


def handle_fields_command(result: ParseResult) -> None:
    """
    Handle 'fields' command - show what every token renders to.

    Usage:
        fields 2018-07-04
        fields "2018-07-04 09:05:03" --json
    """
    if not result.args:
        console.print("[red]Error:[/red] Missing date")
        console.print("[dim]Usage: fields <date>[/dim]")
        return

    source = result.args[0]
    instant = to_instant(source)
    if not instant:
        console.print(f"[red]Error:[/red] Invalid date: {source!r}")
        return

    if result.flags.get("json"):
        console.print(ResultFormatter.fields_to_json(instant))
    else:
        console.print(ResultFormatter.create_fields_table(instant, title=f"Fields for {source}"))


def handle_tokens_command(result: ParseResult) -> None:
    """Handle 'tokens' command - list supported tokens."""
    console.print(ResultFormatter.create_tokens_table())


def handle_pattern_command(result: ParseResult) -> None:
    """
    Handle 'pattern' command - show or set the session pattern for fmt.

    Usage:
        pattern                       # Show current pattern
        pattern "yyyy/MM/dd HH:mm"    # Set pattern
        pattern default               # Back to $DATEMARK_PATTERN / yyyy-MM-dd
    """
    if not result.args:
        console.print(f"Current pattern: [cyan]{escape(repl_context.pattern)}[/cyan]", highlight=False)
        return

    pattern = result.args[0]

    if pattern.lower() in ("default", "clear", "none"):
        repl_context.current_pattern = None
        console.print(f"✓ Pattern reset to [cyan]{escape(repl_context.pattern)}[/cyan]", highlight=False)
        return

    repl_context.current_pattern = pattern
    console.print(f"✓ Pattern set to [cyan]{escape(pattern)}[/cyan]", highlight=False)
