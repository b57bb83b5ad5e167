"""
OptionsSection - Renders the table of flags.

This section is never absent: the built-in ``--help`` flag is appended
after the declared options, so the table always has at least one row.
"""

from typing import Optional

from ..formatting import extended_option, help_row
from .base import BannerSection, SectionContext


class OptionsSection(BannerSection):
    """Renders every declared option followed by the ``--help`` row.

    Boolean options render their negated form (``--[no-]verbose``), array
    options show a comma-separated value list, and any other option takes a
    single ``VALUE``. Aliases follow the long flag; defaults are appended to
    the description.

    Example output:
        Options:
          --[no-]verbose, -v                # Print more output
          --tags=VALUE1,VALUE2,..           # Tags to apply, default: ["a", "b"]
          --help, -h                        # Print this help
    """

    @property
    def name(self) -> str:
        """Section identifier."""
        return "options"

    @property
    def order(self) -> int:
        """Sort order - after the arguments table."""
        return 60

    def render(self, context: SectionContext) -> Optional[str]:
        """Render the options table.

        Args:
            context: The SectionContext containing the command.

        Returns:
            The options table, always including the help row.
        """
        rows = [extended_option(option) for option in context.command.options]
        rows.append(help_row())
        return "\nOptions:\n" + "\n".join(rows)
