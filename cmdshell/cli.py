"""
Main CLI loop for cmdshell.
Drives a Shell repeatedly and reports the result of every command.
"""
import logging
from typing import Optional

from .command_system import CommandResult
from .rich_ui import RichRenderer
from .shell import InputClosedError, Shell

logger = logging.getLogger(__name__)


class CLI:
    """
    Interactive host loop around a Shell.

    The shell reads and dispatches one command per call; this class owns
    the loop, shows the outcome of each command and decides when to stop.
    """

    def __init__(
        self,
        shell: Shell,
        renderer: Optional[RichRenderer] = None,
        show_banner: bool = True,
    ) -> None:
        self._shell = shell
        self._renderer = renderer or RichRenderer()
        self._show_banner = show_banner
        self._running = False

    def run(self) -> int:
        """
        Run the main loop until a command asks to exit or input ends.

        Returns:
            Process exit code
        """
        self._running = True

        if self._show_banner:
            self._renderer.print_banner()

        while self._running:
            try:
                result = self._shell.process()
            except InputClosedError:
                self._renderer.print()
                break
            except KeyboardInterrupt:
                self._renderer.print("\n[dim]Use quit or Ctrl-D to exit[/dim]")
                continue

            self.report(result)
            if result.should_exit:
                self._running = False

        self._running = False
        return 0

    def report(self, result: CommandResult) -> None:
        """Show the outcome of one command."""
        if result.is_error:
            logger.debug("Command failed: %s", result.error.name)
            self._renderer.print_error(str(result.error), result.message)
        elif result.message:
            self._renderer.print_message(result.message)
