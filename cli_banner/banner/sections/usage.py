"""
UsageSection - Renders the usage synopsis.

This section follows the header (order: 20) and is always present.
"""

from typing import Optional

from ...constants import INDENT, SUBCOMMAND_MARKER
from ..formatting import argument_signature
from .base import BannerSection, SectionContext


class UsageSection(BannerSection):
    """Renders the command name followed by its argument signature.

    Required arguments come first, then optional ones in brackets. Commands
    with subcommands get an alternative ``NAME SUBCOMMAND`` form.

    Example output:
        Usage:
          server start PORT [HOST] | server start SUBCOMMAND
    """

    @property
    def name(self) -> str:
        """Section identifier."""
        return "usage"

    @property
    def order(self) -> int:
        """Sort order - right after the header."""
        return 20

    def render(self, context: SectionContext) -> Optional[str]:
        """Render the usage synopsis.

        Args:
            context: The SectionContext containing the command.

        Returns:
            The usage block, with the subcommand form appended if needed.
        """
        usage = f"\nUsage:\n{INDENT}{context.name}{argument_signature(context.command)}"

        if context.command.subcommands:
            return f"{usage} | {context.name} {SUBCOMMAND_MARKER}"

        return usage
