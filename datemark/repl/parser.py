"""
FILE: datemark/repl/parser.py
PURPOSE: Split a REPL line into command, positional args and --flags
EXPORTS:
  - ParseResult
  - parse_command(line) -> ParseResult
DEPENDENCIES:
  - shlex
NOTES:
  - Patterns keep their case (MM is month, mm is minute); only the command is lowercased
  - A --flag takes the next token as its value unless that token is a flag too
  - Dates never start with "--", so "2018-01-30" is always positional
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class ParseResult:
    """One parsed REPL line, e.g. `ago 1544437897000 --locale zh --json`."""

    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, Union[str, bool]] = field(default_factory=dict)
    raw_input: str = ""

    def flag_value(self, name: str) -> Optional[str]:
        """Value of a flag that expects one, None if absent or given bare."""
        value = self.flags.get(name)
        return value if isinstance(value, str) else None


def _is_flag(token: str) -> bool:
    return token.startswith("--") and len(token) > 2


def _tokenize(line: str) -> List[str]:
    try:
        return shlex.split(line)
    except ValueError:
        # Unclosed quote: keep going with a plain split
        return line.split()


def parse_command(line: str) -> ParseResult:
    """
    Parse one REPL line.

        fmt "2018-01-30 14:05" "hh:mm"  -> args ["2018-01-30 14:05", "hh:mm"]
        day 2018-12-10 --locale zh      -> flags {"locale": "zh"}
        clock 3661 --json               -> flags {"json": True}

    Blank input gives an empty command.
    """
    line = line.strip()
    tokens = _tokenize(line) if line else []
    if not tokens:
        return ParseResult(command="", raw_input=line)

    parsed = ParseResult(command=tokens[0].lower(), raw_input=line)
    pending = None

    for token in tokens[1:]:
        if pending is not None and not token.startswith("--"):
            parsed.flags[pending] = token
            pending = None
            continue
        if pending is not None:
            parsed.flags[pending] = True
            pending = None

        if _is_flag(token):
            pending = token[2:]
        else:
            parsed.args.append(token)

    if pending is not None:
        parsed.flags[pending] = True

    return parsed
