"""
FILE: datemark/repl/main.py
PURPOSE: Interactive REPL for trying patterns and relative labels
EXPORTS:
  - main() - Entry point for REPL mode
  - run_repl() - Main REPL loop
  - REPLContext - Session locale and pattern
  - execute_command(result) -> bool
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - datemark.core (formatter, settings)
  - datemark.repl.parser (command parsing)
  - datemark.repl.completer (autocomplete)
NOTES:
  - Uses prompt_toolkit for readline-like features
  - Command history automatic with PromptSession
  - Bottom toolbar shows the live clock and rotating tips
  - Right prompt shows the session locale
  - Ctrl+D or "exit"/"quit" to exit
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Fix Windows console encoding for Unicode characters
# Only wrap if not already wrapped to prevent issues
if sys.platform == "win32":
    import io
    if not isinstance(sys.stdout, io.TextIOWrapper) or sys.stdout.encoding != 'utf-8':
        try:
            sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable
    if not isinstance(sys.stderr, io.TextIOWrapper) or sys.stderr.encoding != 'utf-8':
        try:
            sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.formatted_text.html import html_escape
from rich.console import Console

from ..core.formatter import format_date
from ..core.settings import default_locale, default_pattern
from .parser import parse_command, ParseResult
from .completer import create_completer


# Rich console for formatted output
console = Console()


# --- REPL Context (Persistent State) ---


@dataclass
class REPLContext:
    """
    Persistent context for the REPL session.

    Attributes:
        current_locale: Session label language, or None to follow $DATEMARK_LOCALE
        current_pattern: Session default pattern for fmt, or None to follow $DATEMARK_PATTERN
    """
    current_locale: Optional[str] = None
    current_pattern: Optional[str] = None

    @property
    def locale(self) -> str:
        return self.current_locale or default_locale()

    @property
    def pattern(self) -> str:
        return self.current_pattern or default_pattern()

    def get_prompt(self) -> str:
        """
        Generate prompt string based on current context.

        Returns:
            Prompt like "datemark> " or "datemark:[zh | yyyy/MM/dd]> "
        """
        parts = []

        if self.current_locale:
            parts.append(self.current_locale)

        if self.current_pattern:
            parts.append(self.current_pattern)

        if parts:
            context_str = " | ".join(parts)
            return f"datemark:[{context_str}]> "

        return "datemark> "


# Global REPL context (persists during session, resets on restart)
repl_context = REPLContext()


def format_prompt() -> HTML:
    """Create formatted prompt text with context and colors."""
    parts = []

    if repl_context.current_locale:
        parts.append(f'<cyan>{repl_context.current_locale}</cyan>')

    if repl_context.current_pattern:
        parts.append(f'<ansibrightmagenta>{html_escape(repl_context.current_pattern)}</ansibrightmagenta>')

    if parts:
        context_str = " | ".join(parts)
        return HTML(f"<b>datemark:[{context_str}]&gt; </b>")

    return HTML("<b>datemark&gt; </b>")


# Rotating tips for bottom toolbar
_TOOLBAR_TIPS = [
    "Tip: Quote sources and patterns with spaces: fmt \"2018-01-30 14:05\" \"hh:mm\"",
    "Tip: Use 'pattern <p>' to change the default for fmt",
    "Tip: Use 'locale zh' for Chinese relative labels",
    "Tip: Epoch milliseconds work anywhere a date does",
    "Tip: Press Ctrl+D or type 'exit' to quit",
    "Tip: Type 'tokens' to see every supported token",
]
_tip_index = 0


def get_bottom_toolbar() -> HTML:
    """Bottom toolbar with the current time and a rotating tip."""
    now = format_date(datetime.now(), "yyyy-MM-dd HH:mm:ss")
    tip = _TOOLBAR_TIPS[_tip_index % len(_TOOLBAR_TIPS)]
    toolbar_text = html_escape(f"{now} | {tip}")
    return HTML(f"<style bg='#444444' fg='#ffffff'> {toolbar_text} </style>")


def get_right_prompt() -> HTML:
    """Right prompt showing the effective locale."""
    return HTML(f"<style fg='#888888'>[{repl_context.locale}]</style>")


# Import command handlers from command modules
from .commands import (
    # Formatting handlers
    handle_fmt_command,
    handle_fields_command,
    handle_tokens_command,
    handle_pattern_command,
    # Relative time handlers
    handle_ago_command,
    handle_day_command,
    handle_clock_command,
    handle_now_command,
    # System handlers
    handle_locale_command,
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        result: Parsed command from parser

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    # Exit commands
    if command in ("exit", "quit"):
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handlers = {
        "fmt": handle_fmt_command,
        "format": handle_fmt_command,
        "fields": handle_fields_command,
        "tokens": handle_tokens_command,
        "pattern": handle_pattern_command,
        "ago": handle_ago_command,
        "day": handle_day_command,
        "clock": handle_clock_command,
        "now": handle_now_command,
        "locale": handle_locale_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        handler(result)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl() -> None:
    """
    Main REPL loop.

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    global _tip_index

    # In piped/test environments, skip prompt_toolkit entirely
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
                rprompt=get_right_prompt,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]datemark REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    while True:
        try:
            if use_simple_input or session is None:
                user_input = input(repl_context.get_prompt())
            else:
                user_input = session.prompt(format_prompt())

            result = parse_command(user_input)

            if not execute_command(result):
                break

            _tip_index += 1

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            console.print("[dim]Goodbye![/dim]")
            break
        except Exception as e:
            # Unexpected error - show but don't crash
            console.print(f"[red]Unexpected error:[/red] {e}")
            import traceback
            console.print(traceback.format_exc(), style="dim", markup=False)


def main() -> None:
    """
    Entry point for REPL mode.

    Called when user runs: datemark repl
    """
    try:
        run_repl()
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
