"""Shared test fixtures for tabtree tests."""

from __future__ import annotations

import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

from tabtree import Node, Row, new_column

# Load .env from project root (doesn't override existing env vars)
load_dotenv(Path(__file__).parent.parent / ".env")


@pytest.fixture
def sample_data() -> list[list[object]]:
    """Rows of mixed types, the last value sometimes missing."""
    return [
        [-9, "violation", datetime.date(1989, 12, 27), "this"],
        [0, "progress", datetime.date(1988, 8, 17), "column"],
        [1227, "alcohol", datetime.date(1993, 2, 13)],
        [712, "animal", datetime.date(1999, 7, 1), "returns"],
        [712, "flawed", datetime.date(1993, 2, 13), "error"],
    ]


@pytest.fixture
def sample_tree(sample_data: list[list[object]]) -> Node:
    """Root node with a four column layout and the sample rows pushed."""
    root = Node(
        row=Row(
            columns=[
                new_column(left_align=True),
                new_column(16),
                new_column(),
                new_column(0),
            ]
        )
    )
    for values in sample_data:
        root.push(*values)
    return root


@pytest.fixture
def sample_document() -> str:
    """Sample table document."""
    return """\
printing:
  column_separator: " | "

sections:
  - columns:
      - left_align: true
      - {}
    sort:
      column: 0
    rows:
      - values: [src, 3]
        sort:
          column: 0
          descending: true
        children:
          - values: [src/a.py, 120]
          - values: [src/b.py, 7]
      - values: [README.md, 40]
  - rows:
      - values: [2020-01-02, x]
      - values: [2019-05-06, yy]
"""


@pytest.fixture
def document_path(tmp_path: Path, sample_document: str) -> Path:
    """Write the sample document to a temporary file."""
    path = tmp_path / "table.yaml"
    path.write_text(sample_document)
    return path
