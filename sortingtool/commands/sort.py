"""Read, parse, sort and print in one pass."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import SortingToolError
from ..parsers import parse_items
from ..sorters import sort_and_print
from ..utils import read_lines

if TYPE_CHECKING:
    from ..cli_types import Configuration

logger = logging.getLogger("sortingtool")


def cmd_sort(config: Configuration) -> None:
    """Run the sort pipeline and release the configuration's streams.

    Streams are closed on every exit path, stdin/stdout excepted.

    Raises:
        SortingToolError: If reading, decoding or writing fails
    """
    with config:
        try:
            lines = read_lines(config.input_stream)
        except UnicodeDecodeError as e:
            raise SortingToolError(f"Input is not valid UTF-8: {e.reason}") from e
        except OSError as e:
            raise SortingToolError(f"Failed to read input: {e}") from e
        logger.debug("Read %d line(s)", len(lines))

        items = parse_items(lines, config.data_type)
        logger.debug("Parsed %d %s", len(items), config.data_type.label)

        logger.debug("Sorting with %s", config.sorting_type.config_name)
        try:
            sort_and_print(items, config.sorting_type, config.data_type, config.output_stream)
        except UnicodeEncodeError as e:
            # Undecodable stdin bytes arrive as lone surrogates under surrogateescape
            raise SortingToolError(f"Output cannot be encoded as UTF-8: {e.reason}") from e
        except OSError as e:
            raise SortingToolError(f"Failed to write output: {e}") from e
