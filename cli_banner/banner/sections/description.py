"""
DescriptionSection - Renders the free-text command description.
"""

from typing import Optional

from ...constants import INDENT
from .base import BannerSection, SectionContext


class DescriptionSection(BannerSection):
    """Renders the command description, when the command has one."""

    @property
    def name(self) -> str:
        """Section identifier."""
        return "description"

    @property
    def order(self) -> int:
        """Sort order - after the usage synopsis."""
        return 30

    def render(self, context: SectionContext) -> Optional[str]:
        description = context.command.description
        if description is None:
            return None

        return f"\nDescription:\n{INDENT}{description}"
