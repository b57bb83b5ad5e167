"""
SubcommandsSection - Renders the table of nested commands.

This section appears in the middle of the banner (order: 40) and lists
subcommands in the order they were registered, never sorted.
"""

from typing import Optional

from ..formatting import table_row
from .base import BannerSection, SectionContext


class SubcommandsSection(BannerSection):
    """Renders subcommand names alongside their descriptions.

    Example output:
        Subcommands:
          start                             # Start the server
          stop                              # Stop the server
    """

    @property
    def name(self) -> str:
        """Section identifier."""
        return "subcommands"

    @property
    def order(self) -> int:
        """Sort order - between the description and the arguments."""
        return 40

    def render(self, context: SectionContext) -> Optional[str]:
        """Render one aligned row per subcommand.

        Args:
            context: The SectionContext containing the command.

        Returns:
            The subcommands table, or None if there are no subcommands.
        """
        subcommands = context.command.subcommands
        if not subcommands:
            return None

        rows = [
            # A nested command without a description leaves the comment empty
            table_row(subcommand_name, subcommand.command.description or "")
            for subcommand_name, subcommand in subcommands.items()
        ]
        return "\nSubcommands:\n" + "\n".join(rows)
