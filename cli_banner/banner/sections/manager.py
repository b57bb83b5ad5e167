"""
SectionManager - Manages banner section registration and rendering.

Provides functionality to register, unregister, retrieve, and render
banner sections in a deterministic order.
"""

import logging
from typing import Optional

from .base import BannerSection, SectionContext


logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n"


class SectionManager:
    """Manages banner section registration and rendering.

    The SectionManager maintains a registry of BannerSection instances
    and renders them in ascending ``order``, dropping the sections that
    report themselves absent.

    Example:
        manager = SectionManager()
        manager.register(HeaderSection())
        manager.register(OptionsSection())

        output = manager.render_all(context)
    """

    def __init__(self) -> None:
        """Initialize an empty SectionManager."""
        self._sections: dict[str, BannerSection] = {}

    def register(self, section: BannerSection) -> None:
        """Register a banner section.

        Args:
            section: The BannerSection instance to register.

        Raises:
            ValueError: If a section with the same name is already registered.
        """
        if section.name in self._sections:
            raise ValueError(f"Section '{section.name}' is already registered")
        self._sections[section.name] = section
        logger.debug(f"Registered banner section: {section.name}")

    def unregister(self, name: str) -> None:
        """Unregister a banner section by name.

        Raises:
            KeyError: If no section with the given name is registered.
        """
        if name not in self._sections:
            raise KeyError(f"Section '{name}' is not registered")
        del self._sections[name]
        logger.debug(f"Unregistered banner section: {name}")

    def get(self, name: str) -> Optional[BannerSection]:
        """Get a registered section by name, or None if not found."""
        return self._sections.get(name)

    def ordered(self) -> list[BannerSection]:
        """Return the registered sections in rendering order."""
        # Name breaks ties so equal orders still render deterministically
        return sorted(self._sections.values(), key=lambda s: (s.order, s.name))

    def render_parts(self, context: SectionContext) -> list[str]:
        """Render every section, keeping only the ones that produced output.

        Args:
            context: The SectionContext to pass to each section.

        Returns:
            The rendered sections in order, absent ones removed.
        """
        rendered_parts = []
        for section in self.ordered():
            content = section.render(context)
            if content is not None:
                rendered_parts.append(content)
        return rendered_parts

    def render_all(self, context: SectionContext) -> str:
        """Render all registered sections in order.

        Args:
            context: The SectionContext to pass to each section.

        Returns:
            The output of all present sections, separated by single newlines.
        """
        return SECTION_SEPARATOR.join(self.render_parts(context))

    def list_sections(self) -> list[str]:
        """List all registered section names in registration order."""
        return list(self._sections.keys())

    def __len__(self) -> int:
        """Return the number of registered sections."""
        return len(self._sections)

    def __contains__(self, name: str) -> bool:
        """Check if a section is registered."""
        return name in self._sections
