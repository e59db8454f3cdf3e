"""
Constants and configuration defaults for cmdshell.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "cmdshell"
APP_VERSION: Final[str] = "0.1.0"
APP_DESCRIPTION: Final[str] = "A minimalistic shell for commands"

CONFIG_DIR: Final[Path] = Path.home() / ".cmdshell"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

DEFAULT_PREFIX: Final[str] = "cmdshell> "
TOKEN_SEPARATOR: Final[str] = " "

# Environment overrides for the host CLI
PREFIX_ENV_VAR: Final[str] = "CMDSHELL_PREFIX"
NO_BANNER_ENV_VAR: Final[str] = "CMDSHELL_NO_BANNER"
