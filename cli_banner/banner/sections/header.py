"""
HeaderSection - Renders the command name line.

This section appears first in the banner (order: 10) and is always present.
"""

from typing import Optional

from ...constants import INDENT
from .base import BannerSection, SectionContext


class HeaderSection(BannerSection):
    """Renders the name the command is invoked under.

    Example output:
        Command:
          greet
    """

    @property
    def name(self) -> str:
        """Section identifier."""
        return "header"

    @property
    def order(self) -> int:
        """Sort order - first section in the banner."""
        return 10

    def render(self, context: SectionContext) -> Optional[str]:
        return f"Command:\n{INDENT}{context.name}"
