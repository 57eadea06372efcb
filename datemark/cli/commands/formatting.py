"""
FILE: datemark/cli/commands/formatting.py
PURPOSE: Formatting commands (fmt, fields, tokens)
"""

from typing import Optional

import typer

from ..main import app, console, error_console
from ...core.formatter import format_date
from ...core.parsing import to_instant
from ...core.settings import default_pattern
from ...core.exceptions import DatemarkError, InvalidDateError
from ...formatting import ResultFormatter


@app.command()
def fmt(
    source: str = typer.Argument(..., help="Date string (2018-01-30 18:31:37) or epoch milliseconds"),
    pattern: Optional[str] = typer.Argument(None, help="Token pattern (default: $DATEMARK_PATTERN or yyyy-MM-dd)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Format a date with a token pattern.

    Example:
        datemark fmt 2018-01-30
        datemark fmt "2018-01-30 14:05:09" "yyyy/MM/dd hh:mm:ss"
        datemark fmt 1517241600000 "yyyy-MM-dd HH:mm" --json
    """
    pattern = pattern or default_pattern()

    try:
        result = format_date(source, pattern, strict=True)
        if not result:
            # Empty sources format to "" even in strict mode
            raise InvalidDateError(source)

        if json_output:
            console.print(ResultFormatter.result_to_json("fmt", source, result, pattern=pattern))
        else:
            console.print(result, markup=False, highlight=not raw)

    except InvalidDateError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except DatemarkError as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def fields(
    source: str = typer.Argument(..., help="Date string or epoch milliseconds"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show what every token renders to for a date.

    Example:
        datemark fields "2018-07-04 09:05:03"
        datemark fields 1517241600000 --json
    """
    instant = to_instant(source)
    if not instant:
        error_console.print(f"[red]Error:[/red] Invalid date: {source!r}")
        raise typer.Exit(1)

    if json_output:
        console.print(ResultFormatter.fields_to_json(instant))

    elif raw:
        for line in ResultFormatter.fields_to_raw_lines(instant):
            console.print(line, markup=False, highlight=False)

    else:
        console.print(ResultFormatter.create_fields_table(instant, title=f"Fields for {source}"))


@app.command()
def tokens(
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List the supported format tokens.

    Example:
        datemark tokens
    """
    if raw:
        for line in ResultFormatter.tokens_to_raw_lines():
            console.print(line, markup=False, highlight=False)
        return

    console.print(ResultFormatter.create_tokens_table())
    console.print("\n[dim]Single letters render unpadded, doubled letters pad to 2 digits.[/dim]")
