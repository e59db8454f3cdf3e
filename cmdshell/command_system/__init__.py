"""Command system for cmdshell."""
from .base import Command, CommandError, CommandResult, Handler
from .parser import CommandParser, ParsedInput
from .registry import CommandRegistry

__all__ = [
    'Command', 'CommandError', 'CommandResult', 'Handler',
    'CommandParser', 'ParsedInput',
    'CommandRegistry',
]
