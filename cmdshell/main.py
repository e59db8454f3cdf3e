"""
Main entry point for cmdshell.
"""
import argparse
import logging
import sys
from typing import List, Optional

from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "-p", "--prefix",
        type=str,
        help="Prompt printed before each command"
    )

    parser.add_argument(
        "-c", "--command",
        type=str,
        help="Execute a single command line and exit"
    )

    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the banner on startup"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    from .command_system.commands import get_builtin_commands
    from .config import ConfigError, get_config
    from .cli import CLI
    from .rich_ui import RichRenderer
    from .shell import Shell, ShellError

    renderer = RichRenderer()

    try:
        config = get_config(args.config).config
    except ConfigError as e:
        renderer.print_error("Invalid configuration", str(e))
        return 2

    prefix = args.prefix if args.prefix is not None else config.prefix
    shell = Shell(prefix, get_builtin_commands())
    cli = CLI(shell, renderer, show_banner=config.show_banner and not args.no_banner)

    if args.command is not None:
        result = shell.execute(args.command)
        cli.report(result)
        return 0 if result.is_success else 1

    try:
        return cli.run()
    except ShellError as e:
        renderer.print_error("Fatal error", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
