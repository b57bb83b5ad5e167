"""
Base classes for banner sections.

Provides the BannerSection abstract base class and SectionContext dataclass
for building the composable sections of a command's help banner.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..models import Command


@dataclass(frozen=True)
class SectionContext:
    """Context passed to sections during rendering.

    Attributes:
        command: The command whose banner is being rendered.
        name: The display name the command is invoked under.
    """
    command: Command
    name: str


class BannerSection(ABC):
    """Abstract base class for banner sections.

    Each section produces one block of the banner from the command
    metadata. Sections hold no state; rendering is a pure function of the
    context. A section that has nothing to show returns None from
    ``render()`` and is left out of the banner entirely.

    Example:
        class HeaderSection(BannerSection):
            @property
            def name(self) -> str:
                return "header"

            @property
            def order(self) -> int:
                return 10

            def render(self, context: SectionContext) -> Optional[str]:
                return f"Command:\\n  {context.name}"
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Section identifier.

        Returns:
            A unique string identifier for this section.
        """
        ...

    @property
    def order(self) -> int:
        """Sort order (lower = earlier in the banner).

        Returns:
            An integer representing the sort order.
        """
        return 50

    @abstractmethod
    def render(self, context: SectionContext) -> Optional[str]:
        """Render this section to text.

        Args:
            context: The SectionContext holding the command and display name.

        Returns:
            The rendered section, or None when the section is absent.
        """
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r} order={self.order}>"
