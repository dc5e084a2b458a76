"""Printing engine: renders rows and trees as aligned text."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING, Any, Protocol

from tabtree.row import Row

if TYPE_CHECKING:
    from tabtree.node import Node


class Sink(Protocol):
    """Anything that accepts text."""

    def write(self, text: str, /) -> Any: ...


class Printing:
    """Printing options and algorithm.

    Args:
        column_separator: Text placed between columns.
        line_terminator: Text appended to every row. Empty means none.
        sink: Where text is written. Defaults to ``sys.stdout``.
    """

    def __init__(
        self,
        *,
        column_separator: str = " ",
        line_terminator: str = "\n",
        sink: Sink | None = None,
    ) -> None:
        self.column_separator = column_separator
        self.line_terminator = line_terminator
        self._sink = sink

    @property
    def sink(self) -> Sink:
        # Resolved late so redirected stdout is honored.
        return self._sink if self._sink is not None else sys.stdout

    def format_row(self, row: Row | None) -> str:
        """Return the text of one row, or "" when there is nothing to print."""
        if row is None or row.schema.count == 0:
            return ""

        cells = [
            descriptor % text
            for descriptor, text in zip(row.format_strings(), row.formatted)
        ]
        return self.column_separator.join(cells) + self.line_terminator

    def render_row(self, row: Row | None) -> None:
        """Write one row. Rows without columns produce no output at all."""
        text = self.format_row(row)
        if text:
            self.sink.write(text)

    def render_tree(self, node: Node | None) -> None:
        """Write a node's row (unless it is a root), then all descendants."""
        if node is None:
            return
        if not node.is_root:
            self.render_row(node.row)
        for descendant in node.walk():
            self.render_row(descendant.row)


def render_to_string(target: Node | Row | None, **options: Any) -> str:
    """Render a node or a row into a string.

    Args:
        target: Node (whole subtree) or single row.
        **options: ``column_separator`` and ``line_terminator``.
    """
    buffer = io.StringIO()
    printing = Printing(sink=buffer, **options)
    if isinstance(target, Row):
        printing.render_row(target)
    else:
        printing.render_tree(target)
    return buffer.getvalue()


def print_tree(node: Node | None, **options: Any) -> None:
    """Print a subtree. Options are those of ``Printing``."""
    Printing(**options).render_tree(node)
