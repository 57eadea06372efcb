"""
FILE: datemark/repl/commands/relative.py
PURPOSE: Relative time command handlers for REPL (ago, day, clock, now)
"""

from datetime import datetime

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.constants import SECONDS_PER_DAY
from ...core.formatter import format_date
from ...core.relative import to_local_label, to_day_label, seconds_to_clock
from ...core.settings import resolve_locale
from ...core.exceptions import InvalidInputError
from ...formatting import ResultFormatter


def _show_label(command: str, result: ParseResult, render) -> None:
    """Shared body for ago/day: validate, render with session locale, print."""
    if not result.args:
        console.print("[red]Error:[/red] Missing date")
        console.print(f"[dim]Usage: {command} <date> [--locale en|zh][/dim]")
        return

    target = result.args[0]

    try:
        locale = resolve_locale(result.flag_value("locale") or repl_context.locale)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    label = render(target, locale=locale)
    if not label:
        console.print(f"[red]Error:[/red] Invalid date: {target!r}")
        return

    if result.flags.get("json"):
        console.print(ResultFormatter.result_to_json(command, target, label, locale=locale))
    else:
        console.print(label, markup=False, highlight=False)


def handle_ago_command(result: ParseResult) -> None:
    """
    Handle 'ago' command - relative label with clock time.

    Usage:
        ago "2018-12-10 18:31:37"
        ago 1544437897000 --locale zh
    """
    _show_label("ago", result, to_local_label)


def handle_day_command(result: ParseResult) -> None:
    """
    Handle 'day' command - day-only relative label.

    Usage:
        day 2018-12-10
        day 2018-12-10 --locale zh
    """
    _show_label("day", result, to_day_label)


def handle_clock_command(result: ParseResult) -> None:
    """
    Handle 'clock' command - seconds to HH:mm:ss.

    Usage:
        clock 60        # 00:01:00
    """
    if not result.args:
        console.print("[red]Error:[/red] Missing seconds")
        console.print("[dim]Usage: clock <seconds>[/dim]")
        return

    try:
        seconds = int(result.args[0])
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid seconds: {result.args[0]!r}")
        return

    if seconds < 0 or seconds >= SECONDS_PER_DAY:
        console.print(f"[yellow]Warning:[/yellow] {seconds} is outside one day, the clock wraps around")

    clock = seconds_to_clock(seconds)
    if not clock:
        console.print(f"[red]Error:[/red] {seconds} seconds is out of range")
        return

    if result.flags.get("json"):
        console.print(ResultFormatter.result_to_json("clock", seconds, clock))
    else:
        console.print(clock, markup=False, highlight=False)


def handle_now_command(result: ParseResult) -> None:
    """
    Handle 'now' command - format the current time.

    Usage:
        now                   # Session pattern
        now "HH:mm:ss"
    """
    pattern = result.args[0] if result.args else repl_context.pattern
    formatted = format_date(datetime.now(), pattern)

    if result.flags.get("json"):
        console.print(ResultFormatter.result_to_json("now", "now", formatted, pattern=pattern))
    else:
        console.print(formatted, markup=False, highlight=False)
