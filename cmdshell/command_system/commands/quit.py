"""Quit command for cmdshell."""
from typing import List, Sequence

from ..base import Command, CommandResult


def quit_shell(args: List[str], commands: Sequence[Command]) -> CommandResult:
    """Ask the host loop to stop."""
    return CommandResult.exit("Goodbye!")


QUIT_COMMAND = Command(
    name="quit",
    description="Exit the shell",
    handler=quit_shell,
)
