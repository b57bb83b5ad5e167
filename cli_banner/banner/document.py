"""
Command document module.

Provides the JSON document format that describes a command outside of
Python code, with validation, import and export helpers.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ..constants import DOCUMENT_VERSION
from .formatting import alias_name
from .models import Argument, Command, InvalidCommandError, Option, Subcommand


logger = logging.getLogger(__name__)


class CommandDocumentError(Exception):
    """Raised when a command document cannot be parsed or validated."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        errors: Optional[list[str]] = None,
    ):
        self.line = line
        self.column = column
        self.errors = errors or []

        if line is not None and column is not None:
            full_message = f"{message} (line {line}, column {column})"
        elif line is not None:
            full_message = f"{message} (line {line})"
        else:
            full_message = message

        super().__init__(full_message)


# Valid values of an option's "type" field
OPTION_TYPES = frozenset({"boolean", "array", "string"})

_DOCUMENT_FIELDS = {"version", "name", "command"}
_COMMAND_FIELDS = {"description", "arguments", "options", "subcommands", "examples"}
_ARGUMENT_FIELDS = {"name", "required", "description"}
_OPTION_FIELDS = {"name", "type", "aliases", "alias_names", "required", "description", "default"}


@dataclass(frozen=True)
class CommandDocument:
    """A command together with the display name it is documented under."""
    command: Command
    name: Optional[str] = None


def validate_command_document(data: Any) -> tuple[bool, list[str]]:
    """Validate a command document dictionary.

    Checks the document envelope (version, name) and then the command tree,
    collecting every problem rather than stopping at the first one.

    Args:
        data: Dictionary parsed from a command document.

    Returns:
        A tuple of (is_valid, errors) where errors is empty if valid.

    Example:
        is_valid, errors = validate_command_document({
            "version": "1.0",
            "name": "greet",
            "command": {"arguments": [{"name": "name", "required": True}]},
        })
    """
    if not isinstance(data, dict):
        return False, ["Document must be an object"]

    errors: list[str] = []

    if "version" not in data:
        errors.append("Missing required field: 'version'")
    elif not isinstance(data["version"], str):
        errors.append("Field 'version' must be a string")

    if "name" in data and data["name"] is not None and not isinstance(data["name"], str):
        errors.append("Field 'name' must be a string or null")

    if "command" not in data:
        errors.append("Missing required field: 'command'")
    else:
        errors.extend(validate_command_dict(data["command"], "command"))

    unknown_fields = set(data.keys()) - _DOCUMENT_FIELDS
    if unknown_fields:
        errors.append(f"Unknown fields: {', '.join(sorted(unknown_fields))}")

    return len(errors) == 0, errors


def validate_command_dict(data: Any, path: str = "command") -> list[str]:
    """Validate the dictionary form of a command, recursing into subcommands.

    Args:
        data: The command dictionary.
        path: Location of the command in the document, used in messages.

    Returns:
        A list of error messages, empty if the command is valid.
    """
    if not isinstance(data, dict):
        return [f"Field '{path}' must be an object"]

    errors: list[str] = []

    description = data.get("description")
    if description is not None and not isinstance(description, str):
        errors.append(f"Field '{path}.description' must be a string or null")

    arguments = data.get("arguments", [])
    if not isinstance(arguments, list):
        errors.append(f"Field '{path}.arguments' must be an array")
    else:
        for i, argument in enumerate(arguments):
            errors.extend(_validate_argument(argument, f"{path}.arguments[{i}]"))

    options = data.get("options", [])
    if not isinstance(options, list):
        errors.append(f"Field '{path}.options' must be an array")
    else:
        for i, option in enumerate(options):
            errors.extend(_validate_option(option, f"{path}.options[{i}]"))

    subcommands = data.get("subcommands", {})
    if not isinstance(subcommands, dict):
        errors.append(f"Field '{path}.subcommands' must be an object")
    else:
        for name, subcommand in subcommands.items():
            if not name:
                errors.append(f"Field '{path}.subcommands' has an empty name")
                continue
            errors.extend(validate_command_dict(subcommand, f"{path}.subcommands.{name}"))

    examples = data.get("examples", [])
    if not isinstance(examples, list):
        errors.append(f"Field '{path}.examples' must be an array")
    else:
        for i, example in enumerate(examples):
            if not isinstance(example, str):
                errors.append(f"Field '{path}.examples[{i}]' must be a string")

    unknown_fields = set(data.keys()) - _COMMAND_FIELDS
    if unknown_fields:
        errors.append(f"Unknown fields in '{path}': {', '.join(sorted(unknown_fields))}")

    return errors


def _validate_argument(data: Any, path: str) -> list[str]:
    if not isinstance(data, dict):
        return [f"Field '{path}' must be an object"]

    errors: list[str] = []
    name = data.get("name")
    if not isinstance(name, str) or not name:
        errors.append(f"Field '{path}.name' must be a non-empty string")
    if "required" in data and not isinstance(data["required"], bool):
        errors.append(f"Field '{path}.required' must be a boolean")
    if "description" in data and not isinstance(data["description"], str):
        errors.append(f"Field '{path}.description' must be a string")

    unknown_fields = set(data.keys()) - _ARGUMENT_FIELDS
    if unknown_fields:
        errors.append(f"Unknown fields in '{path}': {', '.join(sorted(unknown_fields))}")
    return errors


def _validate_option(data: Any, path: str) -> list[str]:
    if not isinstance(data, dict):
        return [f"Field '{path}' must be an object"]

    errors: list[str] = []
    name = data.get("name")
    if not isinstance(name, str) or not name:
        errors.append(f"Field '{path}.name' must be a non-empty string")

    if "type" in data and data["type"] not in OPTION_TYPES:
        errors.append(
            f"Field '{path}.type' has invalid value {data['type']!r}. "
            f"Valid values are: {', '.join(sorted(OPTION_TYPES))}"
        )

    for list_field in ("aliases", "alias_names"):
        if list_field not in data:
            continue
        values = data[list_field]
        if not isinstance(values, list):
            errors.append(f"Field '{path}.{list_field}' must be an array")
            continue
        for i, value in enumerate(values):
            if not isinstance(value, str) or not value:
                errors.append(f"Field '{path}.{list_field}[{i}]' must be a non-empty string")

    if "required" in data and not isinstance(data["required"], bool):
        errors.append(f"Field '{path}.required' must be a boolean")
    if "description" in data and not isinstance(data["description"], str):
        errors.append(f"Field '{path}.description' must be a string")

    unknown_fields = set(data.keys()) - _OPTION_FIELDS
    if unknown_fields:
        errors.append(f"Unknown fields in '{path}': {', '.join(sorted(unknown_fields))}")
    return errors


def command_from_dict(data: dict[str, Any]) -> Command:
    """Create a Command from its dictionary form.

    Option ``aliases`` are bare names formatted with ``alias_name`` while
    ``alias_names`` are taken verbatim. Subcommands are built recursively.

    Raises:
        InvalidCommandError: If the dictionary does not describe a valid command.
    """
    if not isinstance(data, dict):
        raise InvalidCommandError(f"expected an object, got {type(data).__name__}", "command")

    return Command(
        description=data.get("description"),
        arguments=[
            Argument(
                name=argument.get("name"),
                required=argument.get("required", False),
                description=argument.get("description", ""),
            )
            for argument in data.get("arguments", [])
        ],
        options=[_option_from_dict(option) for option in data.get("options", [])],
        subcommands={
            name: Subcommand(name=name, command=command_from_dict(subcommand))
            for name, subcommand in data.get("subcommands", {}).items()
        },
        examples=data.get("examples", []),
    )


def _option_from_dict(data: dict[str, Any]) -> Option:
    option_type = data.get("type", "string")
    alias_names = [alias_name(alias) for alias in data.get("aliases", [])]
    alias_names.extend(data.get("alias_names", []))
    return Option(
        name=data.get("name"),
        alias_names=alias_names,
        boolean=option_type == "boolean",
        array=option_type == "array",
        required=data.get("required", False),
        description=data.get("description", ""),
        default=data.get("default"),
    )


def command_to_dict(command: Command) -> dict[str, Any]:
    """Convert a Command to its dictionary form for serialization."""
    data: dict[str, Any] = {}
    if command.description is not None:
        data["description"] = command.description
    if command.arguments:
        data["arguments"] = [
            {
                "name": argument.name,
                "required": argument.required,
                "description": argument.description,
            }
            for argument in command.arguments
        ]
    if command.options:
        data["options"] = [_option_to_dict(option) for option in command.options]
    if command.subcommands:
        data["subcommands"] = {
            name: command_to_dict(subcommand.command)
            for name, subcommand in command.subcommands.items()
        }
    if command.examples:
        data["examples"] = list(command.examples)
    return data


def _option_to_dict(option: Option) -> dict[str, Any]:
    if option.boolean:
        option_type = "boolean"
    elif option.array:
        option_type = "array"
    else:
        option_type = "string"

    data: dict[str, Any] = {
        "name": option.name,
        "type": option_type,
        "required": option.required,
        "description": option.description,
    }
    if option.alias_names:
        data["alias_names"] = list(option.alias_names)
    if option.has_default:
        data["default"] = option.default
    return data


def export_command(command: Command, name: Optional[str] = None) -> str:
    """Serialize a command to a JSON command document.

    Args:
        command: The command to serialize.
        name: Optional display name stored alongside the command.

    Returns:
        The JSON document as a string.
    """
    document: dict[str, Any] = {"version": DOCUMENT_VERSION}
    if name is not None:
        document["name"] = name
    document["command"] = command_to_dict(command)
    return json.dumps(document, indent=2)


def import_command(json_str: str) -> CommandDocument:
    """Deserialize a command document from a JSON string.

    Raises:
        CommandDocumentError: If the JSON is malformed or validation fails.

    Example:
        document = import_command('{"version": "1.0", "command": {}}')
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise CommandDocumentError(
            f"Invalid JSON: {e.msg}",
            line=e.lineno,
            column=e.colno,
        ) from e

    is_valid, errors = validate_command_document(data)
    if not is_valid:
        raise CommandDocumentError(
            f"Command document validation failed: {'; '.join(errors)}",
            errors=errors,
        )

    if data["version"] != DOCUMENT_VERSION:
        logger.warning(
            f"Command document version {data['version']} differs from {DOCUMENT_VERSION}"
        )

    try:
        command = command_from_dict(data["command"])
    except InvalidCommandError as e:
        raise CommandDocumentError(f"Invalid command: {e}") from e

    return CommandDocument(command=command, name=data.get("name"))


def load_command_document(path: Path) -> CommandDocument:
    """Load a command document from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        CommandDocumentError: If the file cannot be read or is not a valid
            command document.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Command document not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CommandDocumentError(f"Cannot read command document {path}: {e}") from e

    document = import_command(content)

    logger.info(f"Loaded command document from {path}")
    return document
