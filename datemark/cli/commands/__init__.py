"""
FILE: datemark/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all commands for easy importing
from .formatting import (
    fmt,
    fields,
    tokens,
)
from .relative import (
    ago,
    day,
    clock,
)
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "fmt",
    "fields",
    "tokens",
    "ago",
    "day",
    "clock",
    "version",
    "help",
    "repl",
]
