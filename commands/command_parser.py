"""
Command Parser
Splits a console input line into commands and commands into tokens
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

# Separator between commands on one line. "\;" is a literal semicolon.
COMMAND_SEPARATOR = ";"
SEPARATOR_REGEX = re.compile(r"(?<!\\);")

QUOTES = ('"', "'")

# A quote right after one of these characters is an ordinary character
SCREENERS = ("\\",)

TOKEN_SEPARATOR = " "


@dataclass
class ParsedCommand:
    """A single command split into its name and arguments."""

    raw: str
    name: str = ""
    arguments: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.name)


def split_commands(text: str) -> List[str]:
    """
    Split an input line on unescaped semicolons.

    Segments are returned as they are, without trimming. Empty segments are
    kept, so ``split_commands("")`` is ``[""]`` and ``"a;;b"`` gives three
    segments. The caller drops blank ones.

    Example:
        "a;b" -> ["a", "b"]
        "a\\;b" -> ["a\\;b"]
    """
    return SEPARATOR_REGEX.split(text)


def _is_screened(raw: str, index: int) -> bool:
    return index > 0 and raw[index - 1] in SCREENERS


def parse_command(raw: str) -> ParsedCommand:
    """
    Tokenize one command.

    The scan is a two state machine, outside quotes and inside quotes:

    * Outside quotes a space ends the current token and a quote opens a
      quoted token. Text gathered since the last boundary is dropped when a
      quote opens, so ``a"b c"d`` yields ``b c`` and ``d``.
    * Inside quotes only the quote that opened the token closes it.
    * A quote preceded by a backslash is literal, the backslash stays.
    * The end of the string flushes whatever follows the last boundary, even
      when a quote is still open.

    The first non-empty token is the name, the rest are the arguments.
    """
    tokens: List[str] = []
    open_quote: Optional[str] = None
    beginning = 0

    for index, char in enumerate(raw):
        token: Optional[str] = None

        if char in QUOTES and not _is_screened(raw, index):
            if open_quote is None:
                open_quote = char
                beginning = index + 1
            elif open_quote == char:
                open_quote = None
                token = raw[beginning:index]
                beginning = index + 1
        elif open_quote is None and char == TOKEN_SEPARATOR:
            token = raw[beginning:index]
            beginning = index + 1

        if token:
            tokens.append(token)

    tail = raw[beginning:]
    if tail:
        tokens.append(tail)

    if not tokens:
        return ParsedCommand(raw=raw)

    return ParsedCommand(raw=raw, name=tokens[0], arguments=tokens[1:])


def parse_line(text: str) -> List[ParsedCommand]:
    """Split a line and parse every non-blank segment, dropping nameless commands."""
    commands = []
    for segment in split_commands(text):
        if not segment.strip():
            continue
        parsed = parse_command(segment)
        if parsed:
            commands.append(parsed)
    return commands
