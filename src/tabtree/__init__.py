"""tabtree - aligned text tables organized as a tree.

Rows live in a tree so that each subtree ("directory") can be sorted on its
own while the whole tree prints as one continuous, aligned output:
- Auto-width columns shared by every row of a schema
- Schema inheritance when nodes are merged
- Stable, type-checked sorting of siblings
- Printing to any text sink
"""

from tabtree.config import TabTreeConfig, load_config
from tabtree.errors import (
    ConfigurationError,
    CyclicTreeError,
    EmptyNodeError,
    HeterogeneousColumnError,
    NilInputError,
    NoComparatorError,
    NoSuchColumnError,
    SchemaConflictError,
    TabTreeError,
)
from tabtree.node import Node
from tabtree.printing import Printing, print_tree, render_to_string
from tabtree.row import Row, to_display_string
from tabtree.schema import Column, ColumnSchema, new_column
from tabtree.sorting import Comparator, ComparatorMatcher, Sorting, match_comparator

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "Column",
    "ColumnSchema",
    "new_column",
    "Row",
    "to_display_string",
    "Node",
    # Sorting
    "Sorting",
    "Comparator",
    "ComparatorMatcher",
    "match_comparator",
    # Printing
    "Printing",
    "print_tree",
    "render_to_string",
    # Config
    "TabTreeConfig",
    "load_config",
    # Errors
    "TabTreeError",
    "NilInputError",
    "EmptyNodeError",
    "SchemaConflictError",
    "CyclicTreeError",
    "NoSuchColumnError",
    "HeterogeneousColumnError",
    "NoComparatorError",
    "ConfigurationError",
]
