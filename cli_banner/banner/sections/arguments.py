"""
ArgumentsSection - Renders the table of positional arguments.
"""

from typing import Optional

from ..formatting import extended_argument
from .base import BannerSection, SectionContext


class ArgumentsSection(BannerSection):
    """Renders positional arguments in declaration order.

    Example output:
        Arguments:
          NAME                              # REQUIRED Who to greet
          TIMES                             # How many times
    """

    @property
    def name(self) -> str:
        """Section identifier."""
        return "arguments"

    @property
    def order(self) -> int:
        """Sort order - after subcommands, before options."""
        return 50

    def render(self, context: SectionContext) -> Optional[str]:
        arguments = context.command.arguments
        if not arguments:
            return None

        return "\nArguments:\n" + "\n".join(
            extended_argument(argument) for argument in arguments
        )
