"""Conversion of raw input lines into typed item sequences."""

from __future__ import annotations

import re
from collections.abc import Callable

import click

from .cli_types import DataType
from .constants import LONG_MAX, LONG_MIN
from .utils import split_tokens

_LONG_RE = re.compile(r"[+-]?[0-9]+")

Item = int | str


def parse_long(token: str) -> int | None:
    """Parse a base-10 signed 64-bit integer, or return None."""
    if not _LONG_RE.fullmatch(token):
        return None
    value = int(token)
    if not LONG_MIN <= value <= LONG_MAX:
        return None
    return value


def parse_lines(lines: list[str]) -> list[str]:
    """Every line is one item, empty lines included."""
    return list(lines)


def parse_words(lines: list[str]) -> list[str]:
    return split_tokens(lines)


def parse_numbers(lines: list[str]) -> list[int]:
    """Parse whitespace-separated integers, skipping tokens that are not."""
    numbers: list[int] = []
    for token in split_tokens(lines):
        value = parse_long(token)
        if value is None:
            click.echo(f'"{token}" is not a long. It will be skipped.', err=True)
            continue
        numbers.append(value)
    return numbers


PARSERS: dict[DataType, Callable[[list[str]], list]] = {
    DataType.LINE: parse_lines,
    DataType.NUMBER: parse_numbers,
    DataType.WORD: parse_words,
}


def parse_items(lines: list[str], data_type: DataType) -> list[Item]:
    """Parse lines with the parser registered for ``data_type``."""
    return PARSERS[data_type](lines)
