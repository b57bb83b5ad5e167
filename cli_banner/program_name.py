"""
Display names for commands.

A command's banner is shown under the name it is invoked with: the program
name followed by the path of command names leading to it.
"""
import os
import sys
from typing import Iterable, Optional

from .constants import PROGRAM_NAME_SEPARATOR


def program_name(names: Iterable[str] = (), program: Optional[str] = None) -> str:
    """
    Build the display name of a (sub)command.

    Args:
        names: Command path below the program, e.g. ``["server", "start"]``.
        program: Program path; defaults to ``sys.argv[0]``.

    Returns:
        The program's base name and the command names, space-separated.
    """
    if program is None:
        program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    parts = [os.path.basename(program)]
    parts.extend(names)
    return PROGRAM_NAME_SEPARATOR.join(part for part in parts if part)
