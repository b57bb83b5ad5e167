"""
Help banner rendering for CLI commands.

This module turns immutable command metadata into the plain-text banner
printed for ``--help``.
"""

from .models import Argument, Command, InvalidCommandError, Option, Subcommand
from .renderer import BannerRenderer, render_banner
from .document import (
    CommandDocument,
    CommandDocumentError,
    export_command,
    import_command,
    load_command_document,
)

__all__ = [
    "Argument",
    "Command",
    "InvalidCommandError",
    "Option",
    "Subcommand",
    "BannerRenderer",
    "render_banner",
    "CommandDocument",
    "CommandDocumentError",
    "export_command",
    "import_command",
    "load_command_document",
]
