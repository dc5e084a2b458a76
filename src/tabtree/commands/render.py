"""Render command implementation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from tabtree.commands.base import CommandContext, SyncCommand
from tabtree.config import RowConfig, SectionConfig, SortConfig, TabTreeConfig, load_config
from tabtree.errors import TabTreeError
from tabtree.node import Node
from tabtree.schema import ColumnSchema


@dataclass
class RenderResult:
    """Result of render command."""

    output: str
    sections: int
    rows: int


@dataclass
class RenderOptions:
    """Options for render command.

    Unset options fall back to the document's own settings.
    """

    column_separator: str | None = None
    line_terminator: str | None = None
    sort_column: int | None = None
    descending: bool = False


def _apply_sort(node: Node, sort: SortConfig | None) -> None:
    if sort is not None:
        node.sort(sort.column, descending=sort.descending)


def _push_rows(parent: Node, rows: list[RowConfig]) -> int:
    """Push rows and their nested rows under parent. Returns rows pushed."""
    count = 0
    for row in rows:
        child = parent.push(*row.values)
        count += 1 + _push_rows(child, row.children)
        _apply_sort(child, row.sort)
    return count


def build_tree(section: SectionConfig, sort: SortConfig | None = None) -> tuple[Node, int]:
    """Build the tree of one section.

    Args:
        section: Section configuration.
        sort: Sort for the section root, replacing the section's own.

    Returns:
        Tuple of (root node, number of rows).
    """
    if section.columns is not None:
        root = Node(schema=ColumnSchema(*(c.to_column() for c in section.columns)))
    else:
        root = Node()

    count = _push_rows(root, section.rows)
    _apply_sort(root, sort or section.sort)
    return root, count


class RenderCommand(SyncCommand[RenderResult]):
    """Render every section of a document as aligned text."""

    def __init__(self, context: CommandContext, options: RenderOptions | None = None) -> None:
        super().__init__(context)
        self.options = options or RenderOptions()

    def get_sort(self) -> SortConfig | None:
        """Sort requested through options, if any."""
        if self.options.sort_column is None:
            return None
        return SortConfig(column=self.options.sort_column, descending=self.options.descending)

    def execute(self) -> RenderResult:
        """Execute the render command."""
        printing = self.config.printing
        options = {
            "column_separator": (
                self.options.column_separator
                if self.options.column_separator is not None
                else printing.column_separator
            ),
            "line_terminator": (
                self.options.line_terminator
                if self.options.line_terminator is not None
                else printing.line_terminator
            ),
        }

        sort = self.get_sort()
        parts: list[str] = []
        rows = 0
        for section in self.config.sections:
            root, count = build_tree(section, sort)
            rows += count
            parts.append(root.render(**options))

        return RenderResult(output="".join(parts), sections=len(self.config.sections), rows=rows)


def render_document(
    config: TabTreeConfig,
    *,
    column_separator: str | None = None,
    line_terminator: str | None = None,
    sort_column: int | None = None,
    descending: bool = False,
) -> RenderResult:
    """Convenience function to render a document.

    Args:
        config: Loaded document.
        column_separator: Override the document's column separator.
        line_terminator: Override the document's line terminator.
        sort_column: Sort each section root on this column.
        descending: Sort from largest to smallest.

    Returns:
        Render result.
    """
    context = CommandContext(config=config)
    options = RenderOptions(
        column_separator=column_separator,
        line_terminator=line_terminator,
        sort_column=sort_column,
        descending=descending,
    )
    cmd = RenderCommand(context, options)
    return cmd.execute()


def handle_render_command(
    path: Path,
    console: Console,
    error_console: Console,
    column_separator: str | None = None,
    line_terminator: str | None = None,
    sort_column: int | None = None,
    descending: bool = False,
) -> None:
    try:
        config = load_config(path)
        result = render_document(
            config,
            column_separator=column_separator,
            line_terminator=line_terminator,
            sort_column=sort_column,
            descending=descending,
        )
    except TabTreeError as e:
        error_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(1) from e

    # Raw write: no markup, wrapping or tab expansion.
    console.file.write(result.output)
