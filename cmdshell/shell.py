"""
The shell that reads a line, resolves it to a command and executes it.

Example:
    >>> def version(args, commands):
    ...     print("v0.1.0")
    ...     return CommandResult.success()
    >>> shell = Shell(None, [Command("version", "Returns the version", version)])
    >>> while True:
    ...     result = shell.process()
    ...     if result.is_error:
    ...         print(result.error, file=sys.stderr)
"""
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .command_system import Command, CommandError, CommandParser, CommandRegistry, CommandResult
from .constants import DEFAULT_PREFIX

logger = logging.getLogger(__name__)


class ShellError(Exception):
    """Base class for unrecoverable shell errors."""


class ShellIOError(ShellError):
    """The prompt could not be written or a line could not be read."""


class InputClosedError(ShellIOError, EOFError):
    """The input stream reached end of file."""


class Shell:
    """
    Parses user input into a command and executes it.

    The shell owns its commands for its whole lifetime; the set is fixed at
    construction. It never loops on its own: the host calls ``process``
    once per command it wants to read.
    """

    def __init__(
        self,
        prefix: Optional[str] = None,
        commands: Iterable[Command] = (),
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ) -> None:
        """
        Create a new shell.

        Args:
            prefix: Printed before the user types a command. None uses
                the default prompt.
            commands: Commands that can be executed, in registration order
            input_stream: Where lines are read from, stdin if omitted
            output_stream: Where the prompt is written, stdout if omitted
        """
        self._prefix = prefix
        self._commands = CommandRegistry(commands)
        self._parser = CommandParser()
        self._input = input_stream
        self._output = output_stream

    @property
    def prefix(self) -> str:
        """The prompt written before each read."""
        return DEFAULT_PREFIX if self._prefix is None else self._prefix

    @property
    def commands(self) -> Sequence[Command]:
        """All available commands in registration order."""
        return self._commands

    def process(self) -> CommandResult:
        """
        Process a whole command.

        Writes the prompt, reads one line and executes the command it names.

        Returns:
            The result of the command, or a failed result classified as
            EMPTY or NOT_FOUND

        Raises:
            ShellIOError: If the prompt could not be written or the line
                could not be read
            InputClosedError: If the input stream is exhausted
        """
        return self.execute(self._read_line())

    def execute(self, line: str) -> CommandResult:
        """
        Execute the command named by an already read line.

        Args:
            line: Raw user input

        Returns:
            The result of the command, or a failed result classified as
            EMPTY or NOT_FOUND
        """
        parsed = self._parser.parse(line)

        if parsed.type == "empty":
            return CommandResult.failure(CommandError.EMPTY)

        command = self._commands.find(parsed.command)
        if command is None:
            logger.debug("No command named %r", parsed.command)
            return CommandResult.failure(CommandError.NOT_FOUND)

        logger.debug("Dispatching %r with %d argument(s)", command.name, len(parsed.args))
        return command.invoke(parsed.args, self._commands)

    def _read_line(self) -> str:
        """Write the prompt and read one line of input."""
        output = self._output if self._output is not None else sys.stdout
        input_stream = self._input if self._input is not None else sys.stdin

        try:
            output.write(self.prefix)
            output.flush()
        except (OSError, ValueError) as e:
            logger.error("Could not flush prefix of input: %s", e)
            raise ShellIOError(f"Could not flush prefix of input: {e}") from e

        try:
            line = input_stream.readline()
        except (OSError, ValueError) as e:
            logger.error("Failed to read user input: %s", e)
            raise ShellIOError(f"Failed to read user input: {e}") from e

        if not line:
            raise InputClosedError("Input stream closed")

        return line

    def __repr__(self) -> str:
        return f"<Shell prefix={self.prefix!r} commands={self._commands.names()}>"
