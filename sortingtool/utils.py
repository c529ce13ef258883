"""sortingtool utility functions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

from .constants import FLAG_PREFIX

# Word separators: ASCII whitespace controls plus Unicode space, line and
# paragraph separators, except the no-break spaces U+00A0, U+2007, U+202F.
# U+0085 is not a separator.
_WHITESPACE_RE = re.compile(
    "[\t\n\x0b\x0c\r\x1c-\x1f \u1680\u2000-\u2006\u2008-\u200a\u2028\u2029\u205f\u3000]+"
)


def read_lines(stream: TextIO) -> list[str]:
    """Read every line from a text stream, without line terminators.

    Universal newlines are expected from the stream, so ``\\r\\n`` and ``\\r``
    endings arrive as ``\\n``. A final terminator does not yield an extra
    empty line.
    """
    return [line.rstrip("\r\n") for line in stream]


def split_tokens(lines: Iterable[str]) -> list[str]:
    """Split lines on runs of whitespace, in encounter order."""
    tokens: list[str] = []
    for line in lines:
        tokens.extend(token for token in _WHITESPACE_RE.split(line) if token)
    return tokens


def is_flag(token: str) -> bool:
    """Return True if the command-line token looks like a flag."""
    return token.startswith(FLAG_PREFIX)


def percentage(count: int, total: int) -> int:
    """Return ``count`` as a floored whole percentage of ``total``."""
    if total <= 0:
        raise ValueError("total must be positive")
    return count * 100 // total
