"""Builtin example commands shipped with cmdshell."""
from typing import List

from ..base import Command
from .echo import ECHO_COMMAND
from .help_cmd import HELP_COMMAND
from .quit import QUIT_COMMAND
from .version import VERSION_COMMAND


def get_builtin_commands() -> List[Command]:
    """Return a fresh list of the builtin commands in registration order."""
    return [VERSION_COMMAND, HELP_COMMAND, ECHO_COMMAND, QUIT_COMMAND]


__all__ = [
    'ECHO_COMMAND', 'HELP_COMMAND', 'QUIT_COMMAND', 'VERSION_COMMAND',
    'get_builtin_commands',
]
