"""
sortingtool - sort numbers, lines or words from text input.

Input is read from a file or stdin, parsed by data type, and printed either
in natural order or grouped by how often each value occurs.
"""

from __future__ import annotations

from .cli import main
from .cli_types import Configuration, DataType, SortingType
from .exceptions import SortingToolError, UserError

__all__ = [
    "Configuration",
    "DataType",
    "SortingToolError",
    "SortingType",
    "UserError",
    "main",
]
