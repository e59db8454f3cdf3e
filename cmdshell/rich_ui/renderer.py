"""
Rich-based renderer for cmdshell host output.
"""
from typing import Any, Optional

from rich.console import Console
from rich.text import Text

from ..constants import APP_DESCRIPTION, APP_NAME, APP_VERSION


ICONS = {
    "error": "✗",
    "check": "✓",
    "info": "●",
}


class RichRenderer:
    """Renders banners, messages and errors for the host loop."""

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        self._console = console or Console()
        self._error_console = error_console or Console(stderr=True)

    @property
    def console(self) -> Console:
        return self._console

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to the output console."""
        self._console.print(*args, **kwargs)

    def print_banner(self) -> None:
        """Print the application banner."""
        line = Text()
        line.append(f"{APP_NAME} v{APP_VERSION}", style="bold")
        line.append(f" - {APP_DESCRIPTION}", style="dim")
        self._console.print(line)
        self._console.print("Type [cyan]help[/cyan] to list the commands, Ctrl-D to exit.", style="dim")
        self._console.print()

    def print_message(self, message: str) -> None:
        """Print a plain message returned by a command."""
        self._console.print(Text(message))

    def print_error(self, message: str, detail: str = "") -> None:
        """
        Print an error message.

        Args:
            message: Error title, usually the rendered error classification
            detail: Optional extra text supplied by the command
        """
        self._error_console.print(Text(f"{ICONS['error']} {message}", style="bold red"))
        if detail:
            self._error_console.print(Text(detail, style="red"))
