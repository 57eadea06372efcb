"""
FILE: datemark/formatting.py
PURPOSE: Shared output formatting for CLI and REPL
EXPORTS:
  - ResultFormatter: Class for rendering instants, tokens and results
DEPENDENCIES:
  - rich (for table formatting)
  - json (for JSON serialization)
  - typing (type hints)
  - datemark.core (Instant, constants, formatter)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
"""

import json
from dataclasses import asdict
from typing import List, Dict, Any, Optional
from rich.table import Table

from .core.constants import TOKEN_DESCRIPTIONS
from .core.formatter import render
from .core.models import Instant


class ResultFormatter:
    """Centralized display formatting."""

    @staticmethod
    def create_fields_table(instant: Instant, title: str = "Fields") -> Table:
        """
        Create Rich table showing what each token renders to for an instant.

        Args:
            instant: Resolved instant to display
            title: Table title

        Returns:
            Rich Table object ready for display
        """
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Token", style="cyan", width=6, no_wrap=True)
        table.add_column("Field", style="white")
        table.add_column("Value", style="magenta")

        for token, meaning, _example in TOKEN_DESCRIPTIONS:
            table.add_row(token, meaning, render(instant, token))

        return table

    @staticmethod
    def create_tokens_table(title: str = "Tokens") -> Table:
        """Create Rich table listing the supported tokens with examples."""
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Token", style="cyan", width=6, no_wrap=True)
        table.add_column("Meaning", style="white")
        table.add_column("Example", style="dim")

        for token, meaning, example in TOKEN_DESCRIPTIONS:
            table.add_row(token, meaning, example)

        return table

    @staticmethod
    def fields_to_json(instant: Instant) -> str:
        """
        Convert an instant and its token values to a JSON string.

        Returns:
            JSON object with the raw fields and a "tokens" mapping
        """
        data: Dict[str, Any] = asdict(instant)
        data["quarter"] = instant.quarter
        data["tokens"] = {
            token: render(instant, token) for token, _meaning, _example in TOKEN_DESCRIPTIONS
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

    @staticmethod
    def result_to_json(command: str, source: Any, result: str, **extra: Optional[str]) -> str:
        """
        Wrap a single command result in a JSON object.

        Args:
            command: Command name (e.g., "fmt", "ago")
            source: Input value as given by the user
            result: Rendered output
            extra: Additional keys (pattern, locale)

        Returns:
            JSON string
        """
        data: Dict[str, Any] = {"command": command, "source": source}
        data.update({key: value for key, value in extra.items() if value is not None})
        data["result"] = result
        return json.dumps(data, indent=2, ensure_ascii=False)

    @staticmethod
    def tokens_to_raw_lines() -> List[str]:
        """Plain text token list, one per line."""
        return [f"{token}\t{meaning}\t{example}" for token, meaning, example in TOKEN_DESCRIPTIONS]

    @staticmethod
    def fields_to_raw_lines(instant: Instant) -> List[str]:
        """Plain text token values, one per line."""
        return [
            f"{token}\t{render(instant, token)}" for token, _meaning, _example in TOKEN_DESCRIPTIONS
        ]
