"""
FILE: datemark/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - DatemarkError (base exception)
  - InvalidDateError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from DatemarkError for easy catching
  - Library functions only raise InvalidDateError when asked to (strict=True)
  - CLI and REPL layers catch and display
"""


class DatemarkError(Exception):
    """Base exception for all datemark errors."""
    pass


class InvalidDateError(DatemarkError):
    """Source value could not be turned into a date."""

    def __init__(self, source):
        self.source = source
        super().__init__(f"Invalid date: {source!r}")


class InvalidInputError(DatemarkError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
