"""
FILE: datemark/cli/commands/relative.py
PURPOSE: Relative time commands (ago, day, clock)
"""

from typing import Optional

import typer

from ..main import app, console, error_console
from ...core.constants import SECONDS_PER_DAY
from ...core.relative import to_local_label, to_day_label, seconds_to_clock
from ...core.settings import resolve_locale
from ...core.exceptions import DatemarkError, InvalidInputError
from ...formatting import ResultFormatter


def _print_label(command: str, target: str, label: str, locale: str, json_output: bool, raw: bool) -> None:
    """Shared output for ago/day."""
    if not label:
        error_console.print(f"[red]Error:[/red] Invalid date: {target!r}")
        raise typer.Exit(1)

    if json_output:
        console.print(ResultFormatter.result_to_json(command, target, label, locale=locale))
    else:
        console.print(label, markup=False, highlight=not raw)


@app.command()
def ago(
    target: str = typer.Argument(..., help="Past date string or epoch milliseconds"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Label language: en or zh"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show how long ago a date was, with clock time.

    Example:
        datemark ago "2018-12-10 18:31:37"
        datemark ago 1544437897000 --locale zh
    """
    try:
        locale = resolve_locale(locale)
        label = to_local_label(target, locale=locale)
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except DatemarkError as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    _print_label("ago", target, label, locale, json_output, raw)


@app.command()
def day(
    target: str = typer.Argument(..., help="Past date string or epoch milliseconds"),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Label language: en or zh"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show which day a date falls on (today, yesterday, ...).

    Example:
        datemark day "2018-12-10 18:32:01"
        datemark day 2018-12-01 --json
    """
    try:
        locale = resolve_locale(locale)
        label = to_day_label(target, locale=locale)
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except DatemarkError as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    _print_label("day", target, label, locale, json_output, raw)


@app.command()
def clock(
    seconds: int = typer.Argument(..., help="Elapsed seconds (0-86399)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Convert a number of seconds to HH:mm:ss.

    Example:
        datemark clock 60        # 00:01:00
        datemark clock 3661      # 01:01:01
    """
    if seconds < 0 or seconds >= SECONDS_PER_DAY:
        error_console.print(
            f"[yellow]Warning:[/yellow] {seconds} is outside one day, the clock wraps around"
        )

    result = seconds_to_clock(seconds)
    if not result:
        error_console.print(f"[red]Error:[/red] {seconds} seconds is out of range")
        raise typer.Exit(1)

    if json_output:
        console.print(ResultFormatter.result_to_json("clock", seconds, result))
    else:
        console.print(result, markup=False, highlight=not raw)
