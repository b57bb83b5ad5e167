"""
Command metadata consumed by the banner renderer.

Provides immutable Argument, Option, Subcommand and Command dataclasses.
Values are validated and normalised once at construction time; the renderer
only ever reads them.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional


class InvalidCommandError(ValueError):
    """Raised when command metadata is structurally invalid."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        if field_name:
            message = f"{field_name}: {message}"
        super().__init__(message)


def _check_string(value: Any, field_name: str, allow_empty: bool = True) -> None:
    if not isinstance(value, str):
        raise InvalidCommandError(
            f"expected a string, got {type(value).__name__}", field_name
        )
    if not allow_empty and not value:
        raise InvalidCommandError("must not be empty", field_name)


def _check_bool(value: Any, field_name: str) -> None:
    if not isinstance(value, bool):
        raise InvalidCommandError(
            f"expected a boolean, got {type(value).__name__}", field_name
        )


def _as_tuple(values: Any, item_type: type, field_name: str) -> tuple:
    """Freeze an iterable into a tuple, checking every item's type."""
    # A bare string is iterable but never a valid sequence here
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidCommandError(
            f"expected a sequence of {item_type.__name__}, got {type(values).__name__}",
            field_name,
        )
    items = tuple(values)
    for index, item in enumerate(items):
        if not isinstance(item, item_type):
            raise InvalidCommandError(
                f"expected {item_type.__name__}, got {type(item).__name__}",
                f"{field_name}[{index}]",
            )
    return items


@dataclass(frozen=True)
class Argument:
    """A positional argument accepted by a command.

    Attributes:
        name: Identifier of the argument, rendered upper-cased.
        required: Whether the argument must be supplied.
        description: One-line description shown in the Arguments table.
    """
    name: str
    required: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        _check_string(self.name, "argument.name", allow_empty=False)
        _check_bool(self.required, "argument.required")
        _check_string(self.description, "argument.description")


@dataclass(frozen=True)
class Option:
    """A named flag accepted by a command.

    Attributes:
        name: Identifier-style name, dasherized when rendered.
        alias_names: Pre-formatted short flags such as ``"-v"``.
        boolean: Flag takes no value and supports a negated ``--no-`` form.
        array: Flag accepts several comma-separated values.
        required: Whether the option must be supplied.
        description: One-line description shown in the Options table.
        default: Default value, or None when the option has no default.
    """
    name: str
    alias_names: tuple[str, ...] = ()
    boolean: bool = False
    array: bool = False
    required: bool = False
    description: str = ""
    default: Any = None

    def __post_init__(self) -> None:
        _check_string(self.name, "option.name", allow_empty=False)
        object.__setattr__(
            self, "alias_names", _as_tuple(self.alias_names, str, "option.alias_names")
        )
        _check_bool(self.boolean, "option.boolean")
        _check_bool(self.array, "option.array")
        _check_bool(self.required, "option.required")
        _check_string(self.description, "option.description")

    @property
    def has_default(self) -> bool:
        """Check if the option declares a default value."""
        return self.default is not None


@dataclass(frozen=True)
class Command:
    """The metadata of a single command, as rendered in its banner.

    Sequences are stored as tuples and ``subcommands`` as a read-only
    mapping, so a Command cannot change once built. ``subcommands`` may be
    given either as a mapping of name to Subcommand or as an iterable of
    Subcommand, in which case each entry is keyed by its own name.
    Commands compare by value but are not hashable, since the subcommand
    mapping is not.

    Example:
        command = Command(
            description="Greet someone",
            arguments=[Argument("name", required=True)],
            options=[Option("verbose", alias_names=["-v"], boolean=True)],
            examples=["Alice"],
        )
    """
    description: Optional[str] = None
    arguments: tuple[Argument, ...] = ()
    options: tuple[Option, ...] = ()
    subcommands: Mapping[str, "Subcommand"] = field(default_factory=dict)
    examples: tuple[str, ...] = ()

    __hash__ = None

    def __post_init__(self) -> None:
        if self.description is not None:
            _check_string(self.description, "command.description")
        object.__setattr__(
            self, "arguments", _as_tuple(self.arguments, Argument, "command.arguments")
        )
        object.__setattr__(
            self, "options", _as_tuple(self.options, Option, "command.options")
        )
        object.__setattr__(
            self, "examples", _as_tuple(self.examples, str, "command.examples")
        )
        object.__setattr__(
            self, "subcommands", MappingProxyType(self._collect_subcommands())
        )

    def _collect_subcommands(self) -> dict[str, "Subcommand"]:
        subcommands = self.subcommands
        if isinstance(subcommands, Mapping):
            collected = {}
            for key, subcommand in subcommands.items():
                _check_string(key, "command.subcommands", allow_empty=False)
                if not isinstance(subcommand, Subcommand):
                    raise InvalidCommandError(
                        f"expected Subcommand, got {type(subcommand).__name__}",
                        f"command.subcommands[{key!r}]",
                    )
                collected[key] = subcommand
            return collected

        entries = _as_tuple(subcommands, Subcommand, "command.subcommands")
        return {subcommand.name: subcommand for subcommand in entries}

    @property
    def required_arguments(self) -> tuple[Argument, ...]:
        """Required arguments, in declaration order."""
        return tuple(argument for argument in self.arguments if argument.required)

    @property
    def optional_arguments(self) -> tuple[Argument, ...]:
        """Optional arguments, in declaration order."""
        return tuple(argument for argument in self.arguments if not argument.required)


@dataclass(frozen=True)
class Subcommand:
    """A named nested command reachable from a parent command."""
    name: str
    command: Command = field(default_factory=Command)

    def __post_init__(self) -> None:
        _check_string(self.name, "subcommand.name", allow_empty=False)
        if not isinstance(self.command, Command):
            raise InvalidCommandError(
                f"expected Command, got {type(self.command).__name__}",
                "subcommand.command",
            )
