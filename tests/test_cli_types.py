"""Tests for sortingtool/cli_types.py - enums and Configuration."""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from sortingtool.cli_types import Configuration, DataType, SortingType


class TestDataType:
    """Tests for DataType enum."""

    @pytest.mark.parametrize(
        ("name", "member", "label"),
        [
            ("long", DataType.NUMBER, "numbers"),
            ("line", DataType.LINE, "lines"),
            ("word", DataType.WORD, "words"),
        ],
    )
    def test_names_and_labels(self, name: str, member: DataType, label: str):
        """Config names resolve to members with plural labels."""
        assert DataType.from_name(name) is member
        assert member.config_name == name
        assert member.label == label

    def test_unknown(self):
        """Unknown names resolve to None."""
        assert DataType.from_name("number") is None


class TestSortingType:
    """Tests for SortingType enum."""

    def test_names(self):
        """Config names resolve to members."""
        assert SortingType.from_name("natural") is SortingType.NATURAL
        assert SortingType.from_name("byCount") is SortingType.BY_COUNT

    def test_unknown(self):
        """Unknown names resolve to None."""
        assert SortingType.from_name("BYCOUNT") is None


class TestConfiguration:
    """Tests for Configuration resource handling."""

    def test_standard_streams_not_closed(self):
        """Closing never touches stdin/stdout."""
        config = Configuration(SortingType.NATURAL, DataType.WORD, sys.stdin, sys.stdout)
        config.close()
        assert not sys.stdout.closed

    def test_file_streams_closed(self):
        """Streams with a path are closed on exit."""
        src, dst = io.StringIO(), io.StringIO()
        config = Configuration(
            SortingType.NATURAL,
            DataType.WORD,
            src,
            dst,
            input_path=Path("in.txt"),
            output_path=Path("out.txt"),
        )
        with config:
            pass
        assert src.closed
        assert dst.closed

    def test_closed_on_error(self):
        """Streams are closed when the block raises."""
        src = io.StringIO()
        config = Configuration(
            SortingType.NATURAL, DataType.WORD, src, sys.stdout, input_path=Path("in.txt")
        )
        with pytest.raises(RuntimeError), config:
            raise RuntimeError("boom")
        assert src.closed

    def test_frozen(self):
        """Configuration is read-only."""
        config = Configuration(SortingType.NATURAL, DataType.WORD, sys.stdin, sys.stdout)
        with pytest.raises(AttributeError):
            config.data_type = DataType.LINE  # type: ignore[misc]
