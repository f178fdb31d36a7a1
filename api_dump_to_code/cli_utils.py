"""
CLI utilities for command line reconstruction and input loading.
"""

import json
from pathlib import Path
from typing import Any

import click

from .pipeline.errors import SchemaLoadError

COMMAND_NAME = "api_dump_to_code"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    # Try to get current Click context for parameter values
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return COMMAND_NAME

    if not cli_args:
        return COMMAND_NAME

    cmd_parts = [COMMAND_NAME]

    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue

        value = cli_args[param_name]
        if not value:
            continue

        # File paths are shown as file names for a stable header
        if isinstance(value, (str, Path)):
            formatted_value = Path(str(value)).name or str(value)
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)

        elif isinstance(param, click.Option):
            # Skip if it's the default value
            if value == param.default:
                continue

            flag = param.opts[0] if param.opts else f"--{param_name}"
            if param.is_flag:
                options.append(flag)
            else:
                options.extend([flag, formatted_value])

    cmd_parts.extend(arguments)
    cmd_parts.extend(options)

    return " ".join(cmd_parts)


def load_json_file(path: str | Path) -> Any:
    """
    Load a JSON input file.

    Raises:
        SchemaLoadError: If the file cannot be read or decoded
    """
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise SchemaLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in {path}: {e}") from e
