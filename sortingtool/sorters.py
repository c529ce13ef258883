"""Sorting and printing of typed item sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from typing import TextIO

import click

from .cli_types import DataType, SortingType
from .constants import LINE_DELIMITER, WORD_DELIMITER
from .parsers import Item
from .utils import percentage


def summary_line(data_type: DataType, total: int) -> str:
    return f"Total {data_type.label}: {total}."


def delimiter_for(data_type: DataType) -> str:
    return LINE_DELIMITER if data_type is DataType.LINE else WORD_DELIMITER


def count_buckets(items: Sequence[Item]) -> dict[int, list[Item]]:
    """Group distinct items by occurrence count.

    Returns:
        Mapping of count to the distinct items seen that many times, with
        keys in ascending order and each item list in natural order
    """
    buckets: dict[int, list[Item]] = {}
    for item, count in Counter(items).items():
        buckets.setdefault(count, []).append(item)
    return {count: sorted(buckets[count]) for count in sorted(buckets)}


def sort_natural(items: Sequence[Item], data_type: DataType, out: TextIO) -> None:
    """Print the total and the items in ascending order."""
    delimiter = delimiter_for(data_type)
    # color=True writes items verbatim, ANSI escape sequences included
    click.echo(summary_line(data_type, len(items)), file=out, color=True)
    body = delimiter.join(str(item) for item in sorted(items))
    click.echo(f"Sorted data:{delimiter}{body}", file=out, color=True)


def sort_by_count(items: Sequence[Item], data_type: DataType, out: TextIO) -> None:
    """Print the total, then each distinct item least frequent first.

    Items sharing a count are printed in natural order.
    """
    total = len(items)
    click.echo(summary_line(data_type, total), file=out, color=True)
    if not total:
        return
    for count, bucket in count_buckets(items).items():
        share = percentage(count, total)
        for item in bucket:
            click.echo(f"{item}: {count} time(s), {share}%", file=out, color=True)


SORTERS: dict[SortingType, Callable[[Sequence[Item], DataType, TextIO], None]] = {
    SortingType.NATURAL: sort_natural,
    SortingType.BY_COUNT: sort_by_count,
}


def sort_and_print(
    items: Sequence[Item], sorting_type: SortingType, data_type: DataType, out: TextIO
) -> None:
    """Print ``items`` with the sorter registered for ``sorting_type``."""
    SORTERS[sorting_type](items, data_type, out)
