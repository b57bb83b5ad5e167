"""
Constants and configuration defaults for cli_banner.
"""
from typing import Final

APP_NAME: Final[str] = "cli-banner"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Render help banners for CLI commands from structured metadata"

# Column layout shared by every table-like banner section
COLUMN_WIDTH: Final[int] = 32
HELP_COLUMN_WIDTH: Final[int] = 30
INDENT: Final[str] = "  "
COMMENT_SEPARATOR: Final[str] = "  # "

HELP_FLAGS: Final[str] = "help, -h"
HELP_DESCRIPTION: Final[str] = "Print this help"
SUBCOMMAND_MARKER: Final[str] = "SUBCOMMAND"
REQUIRED_MARKER: Final[str] = "REQUIRED "

PROGRAM_NAME_SEPARATOR: Final[str] = " "

DOCUMENT_VERSION: Final[str] = "1.0"

LOG_LEVEL_ENV_VAR: Final[str] = "CLI_BANNER_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
