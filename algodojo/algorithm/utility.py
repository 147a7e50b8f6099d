"""Helpers for displaying tables of values."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any, TextIO


def format_table(rows: Iterable[Iterable[Any]]) -> str:
    """Render rows as lines of tab-terminated ``repr`` values."""
    return "".join(
        "".join(f"{value!r}\t" for value in row) + "\n" for row in rows
    )


def print_table(rows: Iterable[Iterable[Any]], file: TextIO | None = None) -> None:
    """Write the table to ``file``, or to standard output."""
    (file if file is not None else sys.stdout).write(format_table(rows))