"""
Base types for the command system in cmdshell.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence


class CommandError(Enum):
    """Classification of a failed command."""
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    EXECUTION_ERROR = "execution_error"

    def __str__(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    CommandError.EMPTY: "No command given",
    CommandError.NOT_FOUND: "Command not found",
    CommandError.EXECUTION_ERROR: "Error while executing command",
}


@dataclass(frozen=True)
class CommandResult:
    """Result of a command execution."""
    error: Optional[CommandError] = None
    message: str = ""
    should_exit: bool = False

    @property
    def is_success(self) -> bool:
        """Check if command succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """Check if command failed."""
        return self.error is not None

    @classmethod
    def success(cls, message: str = "") -> 'CommandResult':
        """Create a success result."""
        return cls(message=message)

    @classmethod
    def failure(
        cls,
        error: CommandError = CommandError.EXECUTION_ERROR,
        message: str = "",
    ) -> 'CommandResult':
        """Create an error result."""
        return cls(error=error, message=message)

    @classmethod
    def exit(cls, message: str = "Goodbye!") -> 'CommandResult':
        """Create an exit result."""
        return cls(message=message, should_exit=True)


Handler = Callable[[List[str], Sequence['Command']], CommandResult]


@dataclass(frozen=True)
class Command:
    """
    An executable command.

    Attributes:
        name: Name the user types to call the command
        description: Short description of what the command does
        handler: Callable run when the command is invoked. It receives the
            argument tokens and the full registry of commands.
    """
    name: str
    description: str
    handler: Handler

    def invoke(self, arguments: List[str], commands: Sequence['Command']) -> CommandResult:
        """
        Invoke the command.

        Args:
            arguments: Argument tokens left after the command name was taken
            commands: Every command registered with the shell

        Returns:
            Whatever the handler returned
        """
        return self.handler(arguments, commands)

    def __repr__(self) -> str:
        return f"<Command {self.name}>"
