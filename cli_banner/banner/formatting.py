"""
Formatting primitives shared by the banner sections.

Provides name inflection, fixed-width column layout, option signatures and
the literal rendering used for option defaults.
"""

import math
import re
from typing import Any

from ..constants import (
    COLUMN_WIDTH,
    COMMENT_SEPARATOR,
    HELP_COLUMN_WIDTH,
    HELP_DESCRIPTION,
    HELP_FLAGS,
    INDENT,
    REQUIRED_MARKER,
)
from .models import Argument, Command, Option


# Boundaries inside camelCase / PascalCase words: "dryRun", "HTTPServer"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_WORD_SEPARATOR = re.compile(r"[_\s]")

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\f": "\\f",
    "\v": "\\v",
    "\b": "\\b",
    "\a": "\\a",
    "\x1b": "\\e",
}


def dasherize(name: str) -> str:
    """Convert an identifier-style name into a hyphenated flag name.

    Underscores and whitespace each become a hyphen, camelCase boundaries
    are split, and the result is lower-cased.

    Example:
        >>> dasherize("dry_run")
        'dry-run'
        >>> dasherize("HTTPServer")
        'http-server'
    """
    return _WORD_SEPARATOR.sub("-", _CAMEL_BOUNDARY.sub("-", str(name))).lower()


def justify(text: str, width: int = COLUMN_WIDTH) -> str:
    """Left-justify text to a column width. Longer text is never truncated."""
    return text.ljust(width)


def alias_name(alias: str) -> str:
    """Format a bare alias as a flag: ``v`` -> ``-v``, ``verb`` -> ``--verb``.

    Aliases that already start with a dash are returned unchanged.
    """
    if alias.startswith("-"):
        return alias
    if len(alias) == 1:
        return f"-{alias}"
    return f"--{alias}"


def literal(value: Any) -> str:
    """Render a default value as a debug-style literal.

    Strings are double-quoted with backslash escapes, booleans and None
    use the ``true``/``false``/``nil`` spelling, floats always carry a
    fractional part, sequences render as ``[a, b]`` and mappings as
    ``{"key" => value}``. Anything else falls back to ``repr``.
    """
    if isinstance(value, str):
        return _string_literal(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_literal(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(literal(item) for item in value) + "]"
    if isinstance(value, dict):
        pairs = (f"{literal(key)} => {literal(item)}" for key, item in value.items())
        return "{" + ", ".join(pairs) + "}"
    return repr(value)


def _string_literal(value: str) -> str:
    chars = []
    for index, char in enumerate(value):
        if char in _STRING_ESCAPES:
            chars.append(_STRING_ESCAPES[char])
        elif char == "#" and value[index + 1:index + 2] in ("{", "$", "@"):
            chars.append("\\#")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            chars.append(f"\\u{ord(char):04X}")
        else:
            chars.append(char)
    return '"' + "".join(chars) + '"'


def _float_literal(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = repr(value)
    mantissa, sep, exponent = text.partition("e")
    if sep and "." not in mantissa:
        return f"{mantissa}.0e{exponent}"
    return text


def argument_signature(command: Command) -> str:
    """Build the usage signature: required args, then ``[optional]`` args.

    Returns an empty string when the command takes no arguments, otherwise
    the signature prefixed with a single space.
    """
    required = " ".join(argument.name.upper() for argument in command.required_arguments)
    optional = " ".join(f"[{argument.name.upper()}]" for argument in command.optional_arguments)
    groups = [group for group in (required, optional) if group]
    if not groups:
        return ""
    return " " + " ".join(groups)


def option_signature(option: Option) -> str:
    """Build the flag signature of an option, e.g. ``--[no-]verbose, -v``."""
    name = dasherize(option.name)
    if option.boolean:
        name = f"[no-]{name}"
    elif option.array:
        name = f"{name}=VALUE1,VALUE2,.."
    else:
        name = f"{name}=VALUE"

    if option.alias_names:
        name = f"{name}, {', '.join(option.alias_names)}"
    return f"--{name}"


def table_row(label: str, comment: str, width: int = COLUMN_WIDTH) -> str:
    """Format one aligned table row: indent, padded label, ``# comment``."""
    return f"{INDENT}{justify(label, width)}{COMMENT_SEPARATOR}{comment}"


def _annotated(description: str, required: bool) -> str:
    if required:
        return f"{REQUIRED_MARKER}{description}"
    return description


def extended_argument(argument: Argument) -> str:
    """Format the Arguments table row for a positional argument."""
    return table_row(
        argument.name.upper(),
        _annotated(argument.description, argument.required),
    )


def extended_option(option: Option) -> str:
    """Format the Options table row for an option, with its default if any."""
    line = table_row(
        option_signature(option),
        _annotated(option.description, option.required),
    )
    if option.has_default:
        line = f"{line}, default: {literal(option.default)}"
    return line


def help_row() -> str:
    """Format the row of the built-in ``--help`` flag."""
    # "--" sits outside the padded label
    return f"{INDENT}--{justify(HELP_FLAGS, HELP_COLUMN_WIDTH)}{COMMENT_SEPARATOR}{HELP_DESCRIPTION}"
