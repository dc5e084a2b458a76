"""Tree nodes carrying rows, with schema inheritance on merge."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from tabtree.errors import (
    CyclicTreeError,
    EmptyNodeError,
    NilInputError,
    NoSuchColumnError,
    SchemaConflictError,
)
from tabtree.row import Row
from tabtree.schema import ColumnSchema
from tabtree.sorting import ComparatorMatcher, Sorting


class Node:
    """A tree node.

    A node's ``schema`` governs the rows of its children. Children can only be
    merged when they hold the very same schema object, which keeps a subtree
    aligned: widening a column for one row widens it for all of them.

    Args:
        row: Row attached to the node. The node adopts the row's schema.
        schema: Schema for a node without a row, e.g. a preconfigured root.

    A root node normally has no row.
    """

    def __init__(self, row: Row | None = None, schema: ColumnSchema | None = None) -> None:
        if row is not None:
            if schema is not None and schema is not row.schema:
                raise SchemaConflictError("node schema must be the row's schema")
            schema = row.schema

        self._parent: Node | None = None
        self._children: list[Node] = []
        self._row = row
        self._schema = schema

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    @property
    def row(self) -> Row | None:
        return self._row

    @property
    def schema(self) -> ColumnSchema | None:
        """Schema dominating this node's children."""
        return self._schema

    @property
    def child_count(self) -> int:
        return len(self._children)

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def push(self, *values: Any) -> Node:
        """Wrap values into a new child node.

        The row is laid out with this node's schema: extra values are dropped
        and missing ones left empty. Without a schema, one is derived from the
        values and adopted by this node.

        Returns:
            The newly created child.
        """
        return self.push_row(Row(*values, schema=self._schema))

    def push_row(self, row: Row) -> Node:
        """Wrap an existing row into a new child node."""
        return self.push_node(Node(row=row))

    def push_node(self, incoming: Node | None) -> Node:
        """Attach ``incoming`` and its whole subtree as the last child.

        A node without a schema adopts the incoming one. Otherwise the incoming
        node must hold the same schema object. An incoming node with neither
        row nor schema gets an empty row laid out with this node's schema.

        Returns:
            The attached node.

        Raises:
            NilInputError: If incoming is None.
            CyclicTreeError: If incoming is this node or one of its ancestors.
            EmptyNodeError: If neither side can provide a schema.
            SchemaConflictError: If the schemas are different objects.
        """
        if incoming is None:
            raise NilInputError()
        if incoming is self or incoming in self.ancestors():
            raise CyclicTreeError()

        if incoming._row is None and incoming._schema is None:
            if self._schema is None:
                raise EmptyNodeError()
            incoming._row = Row(schema=self._schema)
            incoming._schema = self._schema

        schema = incoming._row.schema if incoming._row is not None else incoming._schema

        if self._schema is None:
            self._schema = schema
        elif self._schema is not schema:
            raise SchemaConflictError()

        if incoming._parent is not None:
            incoming._parent._children.remove(incoming)
        incoming._parent = self
        self._children.append(incoming)
        return incoming

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent and so on up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def walk(self) -> Iterator[Node]:
        """Yield every descendant in depth-first pre-order."""
        stack = list(reversed(self._children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._children))

    def cell(self, column: int) -> Any:
        """Raw value at ``column`` of this node's row, or None."""
        if self._row is None or not 0 <= column < len(self._row.fields):
            return None
        return self._row.fields[column]

    def check_column(self, column: int) -> None:
        """Raise NoSuchColumnError unless ``column`` exists in the schema."""
        if self._schema is None:
            raise NoSuchColumnError(column)
        if not 0 <= column < self._schema.count:
            raise NoSuchColumnError(column, self._schema.count)

    def column_values(self, column: int) -> list[Any]:
        """Raw values at ``column`` across the direct children."""
        self.check_column(column)
        return [child.cell(column) for child in self._children]

    def sort(
        self,
        column: int,
        *,
        descending: bool = False,
        matchers: Iterable[ComparatorMatcher] = (),
    ) -> None:
        """Stable sort of the direct children on their raw values at ``column``.

        Values are compared as stored, not by their display strings. Only
        the direct children move; grandchildren keep their order.

        Args:
            column: Column index, starting from 0.
            descending: Sort from largest to smallest.
            matchers: Extra comparator matchers tried before the built-in one.
                The built-in one handles str, int and dates.

        Raises:
            NoSuchColumnError: If the node has no schema or no such column.
            HeterogeneousColumnError: If the values differ in type.
            NoComparatorError: If no matcher can order the values.
        """
        self.check_column(column)
        if len(self._children) < 2:
            return

        sorting = Sorting(descending=descending, matchers=matchers)
        sorting.run(self._children, key=lambda child: child.cell(column), column=column)

    def render(self, **options: Any) -> str:
        """Render the subtree to a string. Options are those of ``Printing``."""
        from tabtree.printing import render_to_string

        return render_to_string(self, **options)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Node(row={self._row!r}, children={len(self._children)})"
