"""Column layout primitives.

A ``ColumnSchema`` is a mutable object shared by reference. Every row and node
holding the same schema sees the same widths, so measuring a new row can widen
a column for rows that were built earlier.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from tabtree.errors import NoSuchColumnError


@dataclass
class Column:
    """Width and alignment of one column.

    Attributes:
        width: Current padding width. Auto columns grow to fit their values.
        fixed_width: If True, measurement never changes the width.
        left_align: If True, values are padded on the right.
    """

    width: int = 0
    fixed_width: bool = False
    left_align: bool = False

    def __post_init__(self) -> None:
        if self.width < 0:
            self.width = 0

    def fit(self, length: int) -> None:
        """Widen an auto column so a value of ``length`` fits."""
        if not self.fixed_width and length > self.width:
            self.width = length

    def format(self) -> str:
        """Return the printf-style descriptor, e.g. ``"%3s"`` or ``"%-5s"``."""
        if self.left_align:
            return f"%-{self.width}s"
        return f"%{self.width}s"


def new_column(width: int | None = None, *, left_align: bool = False) -> Column:
    """Create a column.

    Args:
        width: Fixed width. Omit for an auto-width column. Negative values
            are clamped to 0.
        left_align: Pad on the right instead of the left.

    Returns:
        The new column.
    """
    if width is None:
        return Column(left_align=left_align)
    return Column(width=width, fixed_width=True, left_align=left_align)


class ColumnSchema:
    """Ordered set of columns governing a group of rows."""

    def __init__(self, *columns: Column) -> None:
        # Copy so one Column value used in two schemas doesn't alias.
        self._columns = [replace(c) for c in columns]

    @classmethod
    def from_count(cls, count: int) -> ColumnSchema:
        """Create ``count`` auto-width, right-aligned columns."""
        return cls(*(Column() for _ in range(max(count, 0))))

    @property
    def count(self) -> int:
        return len(self._columns)

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def widths(self) -> list[int]:
        return [c.width for c in self._columns]

    def column(self, index: int) -> Column:
        """Get a column by index.

        Raises:
            NoSuchColumnError: If index is outside the schema.
        """
        if not 0 <= index < len(self._columns):
            raise NoSuchColumnError(index, len(self._columns))
        return self._columns[index]

    def format(self, index: int) -> str:
        """Descriptor of the column at ``index``."""
        return self.column(index).format()

    def formats(self) -> list[str]:
        """Descriptors of all columns, in order."""
        return [c.format() for c in self._columns]

    def measure(self, index: int, text: str) -> None:
        """Widen the column at ``index`` to fit ``text`` unless it is fixed."""
        self._columns[index].fit(len(text))

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __getitem__(self, index: int) -> Column:
        return self._columns[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnSchema):
            return NotImplemented
        return self._columns == other._columns

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ColumnSchema({', '.join(repr(c) for c in self._columns)})"
