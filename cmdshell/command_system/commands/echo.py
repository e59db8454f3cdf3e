"""Echo command for cmdshell."""
from typing import List, Sequence

from rich.console import Console

from ..base import Command, CommandResult


def echo(args: List[str], commands: Sequence[Command]) -> CommandResult:
    """Print the arguments back, separated by spaces."""
    Console().print(" ".join(args), markup=False, highlight=False)
    return CommandResult.success()


ECHO_COMMAND = Command(
    name="echo",
    description="Prints its arguments",
    handler=echo,
)
