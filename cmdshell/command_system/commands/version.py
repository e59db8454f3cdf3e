"""Version command for cmdshell."""
from typing import List, Sequence

from rich.console import Console

from ...constants import APP_NAME, APP_VERSION
from ..base import Command, CommandResult


def version(args: List[str], commands: Sequence[Command]) -> CommandResult:
    """Print the version of the software."""
    Console().print(f"{APP_NAME} v{APP_VERSION}", highlight=False)
    return CommandResult.success()


VERSION_COMMAND = Command(
    name="version",
    description="Returns the version of the software",
    handler=version,
)
