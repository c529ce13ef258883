"""Command-line token parsing into a Configuration."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from pathlib import Path
from typing import TextIO

import click

from .cli_types import Configuration, DataType, SortingType
from .constants import (
    DATA_TYPE_FLAG,
    DEFAULT_DATA_TYPE,
    DEFAULT_SORTING_TYPE,
    FILE_ENCODING,
    FLAG_VALUE_NAMES,
    INPUT_FILE_FLAG,
    OUTPUT_FILE_FLAG,
    SORTING_TYPE_FLAG,
)
from .exceptions import UserError
from .utils import is_flag

logger = logging.getLogger("sortingtool")


def flag_value(tokens: Sequence[str], index: int) -> str:
    """Return the value following the flag at ``index``.

    Raises:
        UserError: If the flag is last or is followed by another flag.
    """
    flag = tokens[index].lower()
    next_index = index + 1
    if next_index >= len(tokens) or is_flag(tokens[next_index]):
        raise UserError(f"No {FLAG_VALUE_NAMES[flag]} defined!")
    return tokens[next_index]


def scan_flags(tokens: Sequence[str]) -> dict[str, str]:
    """Collect recognized flag values, last occurrence winning.

    Unknown flags are reported on stderr and skipped. Non-flag tokens,
    including consumed flag values, are ignored.
    """
    values: dict[str, str] = {}
    for index, token in enumerate(tokens):
        flag = token.lower()
        if flag in FLAG_VALUE_NAMES:
            values[flag] = flag_value(tokens, index)
        elif is_flag(token):
            click.echo(f'"{token}" is not a valid parameter. It will be skipped.', err=True)
    return values


def resolve_sorting_type(name: str) -> SortingType:
    sorting_type = SortingType.from_name(name)
    if sorting_type is None:
        choices = ", ".join(s.config_name for s in SortingType)
        raise UserError(f"Unknown sorting type: {name} (expected one of: {choices})")
    return sorting_type


def resolve_data_type(name: str) -> DataType:
    data_type = DataType.from_name(name)
    if data_type is None:
        choices = ", ".join(d.config_name for d in DataType)
        raise UserError(f"Unknown data type: {name} (expected one of: {choices})")
    return data_type


def open_input(path: Path) -> TextIO:
    try:
        return path.open("r", encoding=FILE_ENCODING)
    except FileNotFoundError:
        raise UserError(f"Input file not found: {path}") from None
    except OSError as e:
        raise UserError(f"Cannot open input file {path}: {e.strerror}") from None


def open_output(path: Path) -> TextIO:
    try:
        return path.open("w", encoding=FILE_ENCODING)
    except OSError as e:
        raise UserError(f"Cannot open output file {path}: {e.strerror}") from None


def parse_arguments(tokens: Sequence[str]) -> Configuration:
    """Build a Configuration from raw command-line tokens.

    All tokens are validated before any file is opened. The returned
    Configuration owns the opened files and must be closed by the caller,
    preferably with ``with``.

    Args:
        tokens: Command-line tokens, without the program name

    Returns:
        Configuration with both streams ready for use

    Raises:
        UserError: On a missing flag value, an unknown sorting or data type,
            or a file that cannot be opened
    """
    values = scan_flags(tokens)
    sorting_type = resolve_sorting_type(values.get(SORTING_TYPE_FLAG, DEFAULT_SORTING_TYPE))
    data_type = resolve_data_type(values.get(DATA_TYPE_FLAG, DEFAULT_DATA_TYPE))
    input_path = Path(values[INPUT_FILE_FLAG]) if INPUT_FILE_FLAG in values else None
    output_path = Path(values[OUTPUT_FILE_FLAG]) if OUTPUT_FILE_FLAG in values else None

    with ExitStack() as stack:
        input_stream = sys.stdin
        output_stream = sys.stdout
        if input_path is not None:
            input_stream = stack.enter_context(open_input(input_path))
        if output_path is not None:
            output_stream = stack.enter_context(open_output(output_path))
        # Ownership moves to the Configuration
        stack.pop_all()

    logger.debug(
        "Configuration: sortingType=%s dataType=%s input=%s output=%s",
        sorting_type.config_name,
        data_type.config_name,
        input_path or "<stdin>",
        output_path or "<stdout>",
    )
    return Configuration(
        sorting_type=sorting_type,
        data_type=data_type,
        input_stream=input_stream,
        output_stream=output_stream,
        input_path=input_path,
        output_path=output_path,
    )
