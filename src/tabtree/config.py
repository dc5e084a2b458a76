"""Table document configuration.

A document is a YAML file describing one or more sections. Each section is
an independent tree with its own column layout; sections are printed one
after another.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tabtree.errors import ConfigurationError
from tabtree.schema import Column, new_column


class ColumnConfig(BaseModel):
    """A column. ``width`` makes it fixed-width; omit it for auto width."""

    width: int | None = None
    left_align: bool = False

    def to_column(self) -> Column:
        return new_column(self.width, left_align=self.left_align)


class SortConfig(BaseModel):
    """How to order the children of a node."""

    column: int
    descending: bool = False


class RowConfig(BaseModel):
    """A row and the rows nested under it."""

    values: list[Any] = Field(default_factory=list)
    children: list[RowConfig] = Field(default_factory=list)
    sort: SortConfig | None = None

    @field_validator("children", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SectionConfig(BaseModel):
    """An independent table with its own layout."""

    columns: list[ColumnConfig] | None = None
    rows: list[RowConfig] = Field(default_factory=list)
    sort: SortConfig | None = None

    @field_validator("rows", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class PrintingConfig(BaseModel):
    """Printing options."""

    column_separator: str = " "
    line_terminator: str = "\n"


class TabTreeConfig(BaseModel):
    """Root of a table document."""

    printing: PrintingConfig = Field(default_factory=PrintingConfig)
    sections: list[SectionConfig] = Field(default_factory=list)

    @field_validator("sections", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


def parse_config(data: Any, path: Path | None = None) -> TabTreeConfig:
    """Validate already loaded document data.

    Raises:
        ConfigurationError: If the data doesn't describe a valid document.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError("Document must be a mapping", path=path)
    try:
        return TabTreeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid document: {e}", path=path) from e


def load_config(path: Path) -> TabTreeConfig:
    """Load and validate a YAML table document.

    Args:
        path: Path to the document.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If the file is missing, isn't valid YAML or
            doesn't describe a valid document.
    """
    if not path.is_file():
        raise ConfigurationError("Document not found", path=path)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", path=path) from e

    return parse_config(data, path=path)
