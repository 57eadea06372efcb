"""
FILE: datemark/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

# Export all command handlers for easy importing
from .formatting import (
    handle_fmt_command,
    handle_fields_command,
    handle_tokens_command,
    handle_pattern_command,
)
from .relative import (
    handle_ago_command,
    handle_day_command,
    handle_clock_command,
    handle_now_command,
)
from .system import (
    handle_locale_command,
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_fmt_command",
    "handle_fields_command",
    "handle_tokens_command",
    "handle_pattern_command",
    "handle_ago_command",
    "handle_day_command",
    "handle_clock_command",
    "handle_now_command",
    "handle_locale_command",
    "handle_help_command",
    "handle_clear_command",
]
