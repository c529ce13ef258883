"""Type definitions for the parsed command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

logger = logging.getLogger("sortingtool")


class DataType(Enum):
    """How each input token is interpreted."""

    NUMBER = ("long", "numbers")
    LINE = ("line", "lines")
    WORD = ("word", "words")

    def __init__(self, config_name: str, label: str):
        self.config_name = config_name
        self.label = label

    @classmethod
    def from_name(cls, name: str) -> DataType | None:
        """Return the member whose config name is ``name``, or None."""
        for member in cls:
            if member.config_name == name:
                return member
        return None


class SortingType(Enum):
    """Output ordering mode."""

    NATURAL = "natural"
    BY_COUNT = "byCount"

    @property
    def config_name(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> SortingType | None:
        """Return the member whose config name is ``name``, or None."""
        for member in cls:
            if member.config_name == name:
                return member
        return None


@dataclass(frozen=True)
class Configuration:
    """Resolved run configuration.

    ``input_path``/``output_path`` are None when the stream is the process's
    standard input/output; only streams opened from a path are closed.
    """

    sorting_type: SortingType
    data_type: DataType
    input_stream: TextIO
    output_stream: TextIO
    input_path: Path | None = None
    output_path: Path | None = None

    def close(self) -> None:
        """Close the file-backed streams, leaving stdin/stdout open."""
        try:
            if self.output_path is not None:
                logger.debug("Closing output file: %s", self.output_path)
                self.output_stream.close()
        finally:
            if self.input_path is not None:
                logger.debug("Closing input file: %s", self.input_path)
                self.input_stream.close()

    def __enter__(self) -> Configuration:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
