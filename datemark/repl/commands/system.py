"""
FILE: datemark/repl/commands/system.py
PURPOSE: System command handlers for REPL
"""

from ..main import console, repl_context
from ..parser import ParseResult
from ...core.constants import SUPPORTED_LOCALES
from ...core.settings import resolve_locale
from ...core.exceptions import InvalidInputError


def handle_locale_command(result: ParseResult) -> None:
    """
    Handle 'locale' command - set the session label language.

    Usage:
        locale              # Show current locale
        locale zh           # Chinese labels
        locale en           # English labels
        locale default      # Follow $DATEMARK_LOCALE again
    """
    if not result.args:
        if repl_context.current_locale:
            console.print(f"Current locale: [cyan]{repl_context.current_locale}[/cyan]")
        else:
            console.print(f"[dim]No session locale (using {repl_context.locale})[/dim]")
        return

    locale_name = result.args[0].lower()

    if locale_name in ("default", "none", "clear"):
        repl_context.current_locale = None
        console.print("✓ Cleared session locale")
        return

    try:
        repl_context.current_locale = resolve_locale(locale_name)
    except InvalidInputError:
        console.print(f"[red]Error:[/red] Invalid locale '{locale_name}'")
        console.print(f"[dim]Valid locales: {', '.join(SUPPORTED_LOCALES)}, default[/dim]")
        return

    console.print(f"✓ Labels now in [cyan]{repl_context.current_locale}[/cyan]")


def handle_help_command(result: ParseResult) -> None:
    """
    Handle 'help' command - show available commands.

    Args:
        result: Parsed command (unused)
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]fmt <date> \\[pattern][/cyan]          Format a date (pattern defaults to session pattern)
  [cyan]fields <date>[/cyan]                 Show what every token renders to
  [cyan]tokens[/cyan]                        List supported tokens
  [cyan]ago <date>[/cyan]                    Relative label with clock time (today 18:31)
  [cyan]day <date>[/cyan]                    Day-only relative label (yesterday)
  [cyan]clock <seconds>[/cyan]               Seconds to HH:mm:ss
  [cyan]now \\[pattern][/cyan]                 Format the current time
  [cyan]pattern \\[<pattern>|default][/cyan]   Show or set the session pattern
  [cyan]locale \\[en|zh|default][/cyan]        Show or set the session locale
  [cyan]help[/cyan]                          Show this help
  [cyan]clear[/cyan]                         Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]                 Exit REPL

[bold cyan]Flags:[/bold cyan]

  [cyan]--locale <en|zh>[/cyan]              Label language for ago/day
  [cyan]--json[/cyan]                        Output as JSON

[bold cyan]Examples:[/bold cyan]

  [dim]fmt 2018-01-30
  fmt "2018-01-30 14:05:09" "hh:mm:ss"     # PM 02:05:09
  fmt 1517241600000 yyyy/M/d
  fields "2018-07-04 09:05:03"
  ago "2018-12-10 18:31:37"
  day 2018-12-10 --locale zh
  clock 3661                                # 01:01:01
  pattern "yyyy/MM/dd HH:mm"
  locale zh[/dim]
"""
    console.print(help_text)


def handle_clear_command(result: ParseResult) -> None:
    """Handle 'clear' command - clear the screen."""
    console.clear()
