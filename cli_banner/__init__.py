"""
cli_banner - help banners for CLI commands.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .banner import (
    Argument,
    Command,
    InvalidCommandError,
    Option,
    Subcommand,
    render_banner,
)

__version__ = APP_VERSION
__all__ = [
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
    'Argument',
    'Command',
    'InvalidCommandError',
    'Option',
    'Subcommand',
    'render_banner',
]
