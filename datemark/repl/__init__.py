"""
FILE: datemark/repl/__init__.py
PURPOSE: REPL package for interactive date formatting
EXPORTS:
  - main() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (REPL interface)
  - rich (formatted output)
  - datemark.core (formatter, relative)
NOTES:
  - Entry point for interactive mode
  - Provides autocomplete and command history
"""

from .main import main

__all__ = ["main"]
