"""
cmdshell - A minimalistic, embeddable shell for commands.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .command_system import Command, CommandError, CommandResult, CommandRegistry
from .shell import Shell, ShellError, ShellIOError, InputClosedError

__version__ = APP_VERSION
__all__ = [
    'APP_NAME', 'APP_VERSION', 'APP_DESCRIPTION',
    'Command', 'CommandError', 'CommandResult', 'CommandRegistry',
    'Shell', 'ShellError', 'ShellIOError', 'InputClosedError',
]
