"""
BannerRenderer - Main orchestrator for assembling help banners.

Provides the BannerRenderer class that runs the banner sections over a
command and joins their output, plus the ``render_banner`` shortcut.
"""

import logging
from typing import Optional

from .models import Command, InvalidCommandError
from .sections import SectionContext, SectionManager, default_sections


logger = logging.getLogger(__name__)


class BannerRenderer:
    """Builds a command's help banner from its sections.

    The renderer holds a SectionManager populated with the built-in
    sections (header, usage, description, subcommands, arguments, options,
    examples). Rendering never mutates the renderer or the command, so one
    instance can serve any number of callers.

    Example:
        renderer = BannerRenderer()
        text = renderer.render(command, "greet")
    """

    def __init__(self, section_manager: Optional[SectionManager] = None) -> None:
        """Initialize the BannerRenderer.

        Args:
            section_manager: Optional SectionManager to render with. Defaults
                to one holding the built-in sections.
        """
        if section_manager is None:
            section_manager = SectionManager()
            for section in default_sections():
                section_manager.register(section)
        self._section_manager = section_manager

    @property
    def section_manager(self) -> SectionManager:
        """Get the section manager."""
        return self._section_manager

    def render(self, command: Command, name: str) -> str:
        """Render the help banner of a command.

        Args:
            command: The command metadata to render.
            name: The display name the command is invoked under.

        Returns:
            The banner text, without a trailing newline.

        Raises:
            InvalidCommandError: If the command or name has the wrong type.
        """
        if not isinstance(command, Command):
            raise InvalidCommandError(
                f"expected Command, got {type(command).__name__}", "command"
            )
        if not isinstance(name, str):
            raise InvalidCommandError(
                f"expected a string, got {type(name).__name__}", "name"
            )

        logger.debug(f"Rendering banner for '{name}'")
        return self._section_manager.render_all(SectionContext(command=command, name=name))


_default_renderer = BannerRenderer()


def render_banner(command: Command, name: str) -> str:
    """Render the help banner of a command with the built-in sections.

    Example:
        >>> print(render_banner(Command(), "greet"))
        Command:
          greet
        <BLANKLINE>
        Usage:
          greet
        <BLANKLINE>
        Options:
          --help, -h                        # Print this help
    """
    return _default_renderer.render(command, name)
