"""Rows: raw field values bound to a column schema."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tabtree.schema import Column, ColumnSchema


def to_display_string(value: Any) -> str:
    """Convert any value to the text shown in a cell.

    ``None`` becomes an empty string, bytes are decoded as UTF-8 and
    everything else goes through ``str()``. Never raises.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def resize_fields(fields: Sequence[Any], count: int) -> list[Any]:
    """Truncate or pad ``fields`` with None to exactly ``count`` items."""
    resized = list(fields[:count])
    resized.extend([None] * (count - len(resized)))
    return resized


class Row:
    """Field values plus their string forms, laid out by a schema.

    Building a row measures its values: every auto-width column of the schema
    is widened to fit. The schema is shared, so the new widths apply to every
    other row holding it.

    Args:
        *data: Field values of any type.
        schema: Schema to lay the row out with. Fields are truncated or padded
            with None to its column count.
        columns: Build a fresh schema from these columns instead.

    If neither ``schema`` nor ``columns`` is given, a schema of auto-width
    columns is derived from the number of fields.
    """

    def __init__(
        self,
        *data: Any,
        schema: ColumnSchema | None = None,
        columns: Sequence[Column] | None = None,
    ) -> None:
        if schema is not None and columns is not None:
            raise ValueError("schema and columns are mutually exclusive")
        if columns is not None:
            schema = ColumnSchema(*columns)

        if schema is None:
            schema = ColumnSchema.from_count(len(data))
            fields = list(data)
        else:
            fields = resize_fields(data, schema.count)

        self._schema = schema
        self._fields = tuple(fields)
        self._formatted = tuple(to_display_string(f) for f in fields)

        for index, text in enumerate(self._formatted):
            schema.measure(index, text)

    @property
    def schema(self) -> ColumnSchema:
        return self._schema

    @property
    def fields(self) -> tuple[Any, ...]:
        """Raw values, resized to the schema's column count."""
        return self._fields

    @property
    def formatted(self) -> tuple[str, ...]:
        """String form of each field."""
        return self._formatted

    def format_strings(self) -> list[str]:
        """Current descriptor of each column in the row's schema."""
        return self._schema.formats()

    def __str__(self) -> str:
        from tabtree.printing import render_to_string

        return render_to_string(self, line_terminator="")

    def __repr__(self) -> str:
        return f"Row({', '.join(repr(f) for f in self._fields)})"
