"""
ExamplesSection - Renders usage examples.

This section appears last in the banner (order: 70).
"""

from typing import Optional

from ...constants import INDENT
from .base import BannerSection, SectionContext


class ExamplesSection(BannerSection):
    """Renders each example prefixed with the command's display name.

    Example output:
        Examples:
          greet Alice
          greet Alice 3
    """

    @property
    def name(self) -> str:
        """Section identifier."""
        return "examples"

    @property
    def order(self) -> int:
        """Sort order - last section in the banner."""
        return 70

    def render(self, context: SectionContext) -> Optional[str]:
        examples = context.command.examples
        if not examples:
            return None

        rows = [f"{INDENT}{context.name} {example}" for example in examples]
        return "\nExamples:\n" + "\n".join(rows)
