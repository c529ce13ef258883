"""sortingtool command implementations."""

from __future__ import annotations

from .sort import cmd_sort

__all__ = [
    "cmd_sort",
]
