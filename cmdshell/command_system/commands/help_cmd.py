"""Help command for cmdshell."""
from typing import List, Sequence

from rich.console import Console
from rich.text import Text

from ..base import Command, CommandError, CommandResult
from ..registry import CommandRegistry


def show_help(args: List[str], commands: Sequence[Command]) -> CommandResult:
    """
    Print every registered command with its description.

    Arguments narrow the listing to the named commands. Naming a command
    that is not registered fails the whole call.
    """
    registry = commands if isinstance(commands, CommandRegistry) else CommandRegistry(commands)
    selected = registry.list_commands()
    if args:
        wanted = [arg for arg in args if arg]
        unknown = [name for name in wanted if not registry.has_command(name)]
        if unknown:
            return CommandResult.failure(
                CommandError.EXECUTION_ERROR,
                f"Unknown command: {', '.join(unknown)}",
            )
        selected = [c for c in selected if c["name"] in wanted]

    console = Console()
    max_name_len = max((len(c["name"]) for c in selected), default=10)

    header = Text()
    header.append("● ", style="cyan")
    header.append("HELP", style="bold blue")
    console.print(header)

    for info in selected:
        line = Text()
        line.append(f"  {info['name']:<{max_name_len + 2}}", style="bold")
        line.append(info["description"], style="dim")
        console.print(line)

    return CommandResult.success()


HELP_COMMAND = Command(
    name="help",
    description="Prints out this help",
    handler=show_help,
)
