"""
Banner sections module.

Provides the base classes, the manager and the built-in sections that make
up a command's help banner.
"""

from .base import BannerSection, SectionContext
from .manager import SectionManager
from .header import HeaderSection
from .usage import UsageSection
from .description import DescriptionSection
from .subcommands import SubcommandsSection
from .arguments import ArgumentsSection
from .options import OptionsSection
from .examples import ExamplesSection


def default_sections() -> list[BannerSection]:
    """Return fresh instances of the built-in sections, in banner order."""
    return [
        HeaderSection(),
        UsageSection(),
        DescriptionSection(),
        SubcommandsSection(),
        ArgumentsSection(),
        OptionsSection(),
        ExamplesSection(),
    ]


__all__ = [
    "BannerSection",
    "SectionContext",
    "SectionManager",
    "HeaderSection",
    "UsageSection",
    "DescriptionSection",
    "SubcommandsSection",
    "ArgumentsSection",
    "OptionsSection",
    "ExamplesSection",
    "default_sections",
]
