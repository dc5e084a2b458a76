"""Exception hierarchy for tabtree."""

from __future__ import annotations

from pathlib import Path


class TabTreeError(Exception):
    """Base class for all tabtree errors.

    Attributes:
        message: Human readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NilInputError(TabTreeError):
    """Raised when None is pushed as a node."""

    def __init__(self, message: str = "incoming node can't be None") -> None:
        super().__init__(message)


class EmptyNodeError(TabTreeError):
    """Raised when a node carries neither a row nor a schema to merge."""

    def __init__(self, message: str = "can't add empty node") -> None:
        super().__init__(message)


class SchemaConflictError(TabTreeError):
    """Raised when an incoming node holds a different schema object."""

    def __init__(self, message: str = "incoming node must have the same schema") -> None:
        super().__init__(message)


class CyclicTreeError(TabTreeError):
    """Raised when a merge would make a node its own ancestor."""

    def __init__(self, message: str = "incoming node is an ancestor of the receiving node") -> None:
        super().__init__(message)


class NoSuchColumnError(TabTreeError):
    """Raised when a column index falls outside the schema."""

    def __init__(self, column: int, count: int | None = None) -> None:
        if count is None:
            message = f"no such column: {column} (node has no schema)"
        else:
            message = f"no such column: {column} (schema has {count} columns)"
        super().__init__(message)
        self.column = column
        self.count = count


class HeterogeneousColumnError(TabTreeError):
    """Raised when sort values don't share one runtime type."""

    def __init__(self, column: int | None, types: list[type]) -> None:
        names = ", ".join(sorted({t.__name__ for t in types}))
        where = "values" if column is None else f"column {column}"
        super().__init__(f"{where} doesn't contain identical value types: {names}")
        self.column = column
        self.types = types


class NoComparatorError(TabTreeError):
    """Raised when no comparator matcher recognizes a value type."""

    def __init__(self, value_type: type) -> None:
        super().__init__(f"don't know how to sort {value_type.__name__}")
        self.value_type = value_type


class ConfigurationError(TabTreeError):
    """Raised for unreadable or invalid table documents."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        if path is not None:
            message = f"{message} ({path})"
        super().__init__(message)
        self.path = path
