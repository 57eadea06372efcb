"""
FILE: datemark/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - DatemarkCompleter (Completer for command/arg completion)
  - create_completer() -> DatemarkCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
  - datemark.core.constants (locales, tokens)
NOTES:
  - Suggests command names when at start of line
  - Suggests locale values after "locale" command and --locale flag
  - Suggests flags after commands (--json, --locale)
  - Suggests pattern presets after "pattern" command
  - Command matching is case-insensitive
"""

from typing import Iterable
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import (
    ABSOLUTE_PATTERN,
    CLOCK_PATTERN,
    DEFAULT_PATTERN,
    SUPPORTED_LOCALES,
)


class DatemarkCompleter(Completer):
    """
    Custom completer for the datemark REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Flags after command names
    - Locale values after "locale" / --locale
    - Pattern presets after "pattern"
    """

    # Available commands
    COMMANDS = [
        "fmt", "fields", "tokens", "ago", "day", "clock", "now",
        "pattern", "locale", "help", "clear", "exit", "quit"
    ]

    COMMAND_DESCRIPTIONS = {
        "fmt": "Format a date with a pattern",
        "fields": "Show every token value for a date",
        "tokens": "List supported tokens",
        "ago": "Relative label with clock time",
        "day": "Day-only relative label",
        "clock": "Seconds to HH:mm:ss",
        "now": "Format the current time",
        "pattern": "Show or set the session pattern",
        "locale": "Show or set the session locale",
        "help": "Show help",
        "clear": "Clear the screen",
        "exit": "Exit REPL",
        "quit": "Exit REPL",
    }

    # Command-specific flags
    COMMAND_FLAGS = {
        "fmt": ["--json"],
        "fields": ["--json"],
        "ago": ["--locale", "--json"],
        "day": ["--locale", "--json"],
        "clock": ["--json"],
        "now": ["--json"],
    }

    PATTERN_PRESETS = [
        DEFAULT_PATTERN,
        ABSOLUTE_PATTERN,
        CLOCK_PATTERN,
        "yyyy/MM/dd hh:mm:ss",
        "default",
    ]

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Args:
            document: Current document with cursor position
            complete_event: Event that triggered completion

        Yields:
            Completion objects for matching suggestions

        Logic:
            1. If at start or only whitespace -> suggest commands
            2. If command is "locale" -> suggest locales
            3. If command is "pattern" -> suggest presets
            4. If after --locale flag -> suggest locales
            5. If typing a flag -> suggest flags for the command
            6. Otherwise -> no suggestions (a date or pattern is being typed)
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        ends_with_space = text_before_cursor.endswith(" ")

        # Case 1: Empty input or first word -> suggest commands
        if not words or (not ends_with_space and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_commands(word)
            return

        command = words[0].lower()

        # Case 2: "locale" -> suggest locale values
        if command == "locale":
            if len(words) == 1 and ends_with_space:
                yield from self._complete_locales("")
            elif len(words) == 2 and not ends_with_space:
                yield from self._complete_locales(words[1])
            return

        # Case 3: "pattern" -> suggest presets
        if command == "pattern":
            if len(words) == 1 and ends_with_space:
                yield from self._complete_patterns("")
            return

        last_word = words[-1]

        # Case 4: value for --locale
        if ends_with_space and last_word == "--locale":
            yield from self._complete_locales("")
            return
        if not ends_with_space and len(words) >= 2 and words[-2] == "--locale":
            yield from self._complete_locales(last_word)
            return

        # Case 5: flags
        if not ends_with_space and last_word.startswith("--"):
            yield from self._complete_flags(command, last_word)
            return
        if ends_with_space and len(words) >= 2:
            yield from self._complete_flags(command, "")

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        """
        Complete command names.

        Args:
            word: Partial command being typed

        Yields:
            Completion objects for matching commands
        """
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.COMMAND_DESCRIPTIONS.get(command, ""),
                )

    def _complete_flags(self, command: str, word: str) -> Iterable[Completion]:
        """Complete flag names for a given command."""
        for flag in self.COMMAND_FLAGS.get(command, []):
            if flag.startswith(word.lower()):
                yield Completion(flag, start_position=-len(word), display=flag)

    def _complete_locales(self, word: str) -> Iterable[Completion]:
        """Complete supported locale codes."""
        word_lower = word.lower()
        for locale in SUPPORTED_LOCALES:
            if locale.startswith(word_lower):
                yield Completion(locale, start_position=-len(word), display=locale)

    def _complete_patterns(self, word: str) -> Iterable[Completion]:
        """Complete pattern presets (quoted when they contain spaces)."""
        for preset in self.PATTERN_PRESETS:
            text = f'"{preset}"' if " " in preset else preset
            if text.startswith(word):
                yield Completion(text, start_position=-len(word), display=preset)


def create_completer() -> DatemarkCompleter:
    """
    Create and return a DatemarkCompleter instance.

    Usage:
        completer = create_completer()
        session = PromptSession(completer=completer)
    """
    return DatemarkCompleter()
