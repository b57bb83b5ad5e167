"""
Main entry point for cli_banner.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from .constants import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
)


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "document",
        type=Path,
        help="Path to a JSON command document"
    )

    parser.add_argument(
        "-n", "--name",
        type=str,
        help="Display name to render the command under"
    )

    parser.add_argument(
        "-p", "--program",
        type=str,
        help="Program name used when neither --name nor the document gives one"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    return parser.parse_args(argv)


def resolve_log_level(args: argparse.Namespace) -> int:
    """
    Pick the logging level from the CLI flag or the environment.

    ``--verbose`` wins; otherwise the level named by the environment variable
    is used, falling back to WARNING for unknown names.
    """
    if args.verbose:
        return logging.DEBUG

    name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int, console: Console) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def resolve_display_name(args: argparse.Namespace, document_name: Optional[str]) -> str:
    """Choose the display name: --name, then the document's name, then the program."""
    from .program_name import program_name

    if args.name:
        return args.name
    if document_name:
        return document_name
    return program_name(program=args.program or args.document.stem)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    err_console = Console(stderr=True)
    configure_logging(resolve_log_level(args), err_console)

    from .banner import CommandDocumentError, load_command_document, render_banner

    try:
        document = load_command_document(args.document)
    except (FileNotFoundError, CommandDocumentError) as e:
        err_console.print(f"Error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1

    name = resolve_display_name(args, document.name)
    logger.debug(f"Rendering {args.document} as '{name}'")

    print(render_banner(document.command, name))
    return 0


if __name__ == "__main__":
    sys.exit(main())
