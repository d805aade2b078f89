"""Text rendering helpers: value formatting, streaming and simple ASCII tables."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterable, List, Mapping, Sequence, TextIO

_MAX_OUTPUT_LENGTH = 5


def _format_sequence(items: Sequence[Any]) -> str:
    if len(items) <= _MAX_OUTPUT_LENGTH:
        return "[" + ", ".join(to_string(item) for item in items) + "]"
    head = "".join(to_string(item) + ", " for item in items[:_MAX_OUTPUT_LENGTH])
    return "[" + head + "... ]"


def _format_mapping(mapping: Mapping[Any, Any]) -> str:
    try:
        items = sorted(mapping.items(), key=operator.itemgetter(0))
    except TypeError:
        items = list(mapping.items())
    parts: List[str] = []
    for count, (key, value) in enumerate(items):
        if count == _MAX_OUTPUT_LENGTH:
            parts.append("...")
            break
        parts.append(f"{to_string(key)} : {to_string(value)}")
        if count != len(items) - 1:
            parts.append(",  ")
    return "{" + "".join(parts) + "}"


def to_string(value: Any) -> str:
    """Render ``value`` as text.

    Booleans print as ``true``/``false``, floats in ``%g`` style, pairs as
    ``(a,b)``, sequences and mappings with at most five elements shown.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, complex):
        return f"({value.real:g},{value.imag:g})"
    if isinstance(value, tuple) and len(value) == 2:
        return f"({to_string(value[0])},{to_string(value[1])})"
    if isinstance(value, (list, tuple)):
        return _format_sequence(value)
    if isinstance(value, Mapping):
        return _format_mapping(value)
    return str(value)


def stream(file: TextIO, *args: Any) -> None:
    """Write every argument, rendered with :func:`to_string`, to ``file``."""
    file.write("".join(to_string(arg) for arg in args))


def echo(*args: Any) -> None:
    """Write every argument to standard output."""
    stream(sys.stdout, *args)


class Table:
    """A simple ASCII table with a header row and left-aligned columns."""

    def __init__(self, headers: Iterable[Any], indent: str = "") -> None:
        self._indent = indent
        self._headers: List[str] = [str(h) for h in headers]
        self._sizes: List[int] = [len(h) for h in self._headers]
        self._rows: List[List[str]] = []

    def add_row(self, *args: Any) -> None:
        """Append a row; it must have one value per column."""
        if len(args) != len(self._headers):
            raise ValueError(
                f"the table was constructed with {len(self._headers)} columns, "
                f"but a row with {len(args)} columns is being added: "
                "the two values must be equal"
            )
        row = [to_string(arg) for arg in args]
        self._rows.append(row)
        self._sizes = [max(len(cell), size) for cell, size in zip(row, self._sizes)]

    def _render_row(self, row: Sequence[str]) -> str:
        return "".join(
            cell + " " * (size - len(cell) + 2) for cell, size in zip(row, self._sizes)
        )

    def __str__(self) -> str:
        lines = [
            self._indent + self._render_row(self._headers),
            self._indent + "".join("-" * (size + 2) for size in self._sizes),
        ]
        lines.extend(self._indent + self._render_row(row) for row in self._rows)
        return "\n".join(lines) + "\n"