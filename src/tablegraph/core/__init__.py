"""
Core modules for tablegraph.

This package contains the fundamental building blocks:
- types: Data structures (ElementNode, TextNode, Style, Envelope)
- graph: Read-only id-indexed document graph
- grid: Row/column helpers
- result: Ok/Err result type
"""

from .exceptions import (
    CellOutOfRangeError, ConfigError, EnvelopeNotFoundError,
    NodeNotFoundError, TableGraphError,
)
from .graph import DocumentGraph
from .grid import Grid, grid_dimensions, is_empty_grid, pad_grid, set_cell
from .result import Err, Ok, Result
from .types import (
    ENVELOPE_FORMAT, Attribute, ElementNode, Envelope, Interactions, Meta,
    Node, NodeData, NodeKind, Payload, Style, StyleVariant, TextNode, make_id,
)

__all__ = [
    # Types
    "ENVELOPE_FORMAT", "Attribute", "ElementNode", "Envelope", "Interactions",
    "Meta", "Node", "NodeData", "NodeKind", "Payload", "Style", "StyleVariant",
    "TextNode", "make_id",
    # Graph
    "DocumentGraph",
    # Grid
    "Grid", "grid_dimensions", "is_empty_grid", "pad_grid", "set_cell",
    # Results & errors
    "Ok", "Err", "Result",
    "TableGraphError", "EnvelopeNotFoundError", "NodeNotFoundError",
    "ConfigError", "CellOutOfRangeError",
]
