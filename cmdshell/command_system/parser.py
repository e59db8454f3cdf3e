"""
Command parser for cmdshell.
Splits a raw input line into a command name and its arguments.
"""
from dataclasses import dataclass, field
from typing import List

from ..constants import TOKEN_SEPARATOR


@dataclass
class ParsedInput:
    """Result of parsing user input."""
    type: str  # 'command' or 'empty'
    command: str = ""
    args: List[str] = field(default_factory=list)
    raw: str = ""


class CommandParser:
    """
    Parser for shell input lines.

    Tokens are separated by single spaces only: there is no quoting or
    escaping, and consecutive spaces yield empty tokens. The command name is
    the last token of the line; everything before it is passed on as
    arguments.
    """

    def tokenize(self, line: str) -> List[str]:
        """
        Split a line into tokens.

        Args:
            line: Raw user input

        Returns:
            Tokens in input order, empty if the line is blank
        """
        text = line.strip()
        if not text:
            return []
        return text.split(TOKEN_SEPARATOR)

    def parse(self, line: str) -> ParsedInput:
        """
        Parse user input into a structured result.

        Args:
            line: Raw user input

        Returns:
            ParsedInput with the command name and remaining arguments
        """
        tokens = self.tokenize(line)

        if not tokens:
            return ParsedInput(type="empty", raw=line)

        command = tokens.pop()
        return ParsedInput(type="command", command=command, args=tokens, raw=line)
