"""
Command registry for cmdshell.
Holds the ordered, fixed set of commands a shell can dispatch to.
"""
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, overload

from .base import Command


class CommandRegistry(Sequence[Command]):
    """
    Ordered, read-only collection of commands.

    The registry is fixed at construction. Names are not required to be
    unique; when several commands share a name the one registered last
    wins on lookup.
    """

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands = tuple(commands)

    @overload
    def __getitem__(self, index: int) -> Command: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Command]: ...

    def __getitem__(self, index):
        return self._commands[index]

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def find(self, name: str) -> Optional[Command]:
        """
        Get the command registered last under ``name``.

        Args:
            name: Exact command name

        Returns:
            Command instance or None
        """
        matches = [command for command in self._commands if command.name == name]
        return matches[-1] if matches else None

    def has_command(self, name: str) -> bool:
        """Check if a command exists."""
        return any(command.name == name for command in self._commands)

    def names(self) -> List[str]:
        """List command names in registration order."""
        return [command.name for command in self._commands]

    def list_commands(self) -> List[Dict[str, str]]:
        """
        List all registered commands.

        Returns:
            List of command info dicts in registration order
        """
        return [
            {"name": command.name, "description": command.description}
            for command in self._commands
        ]

    def __repr__(self) -> str:
        return f"<CommandRegistry {self.names()}>"
