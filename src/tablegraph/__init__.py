"""
tablegraph - tabular data <-> Webflow XscpData document graphs.

    >>> from tablegraph import build_table, extract_table, parse_csv
    >>> envelope = build_table(parse_csv("a,b\\nc,d\\n"))
    >>> extract_table(envelope).rows
    [['a', 'b'], ['c', 'd']]
"""

__version__ = "0.3.0"

from .config import TableOptions, load_config
from .core.graph import DocumentGraph
from .core.types import ElementNode, Envelope, Style, TextNode
from .graph.builder import TableGraphBuilder, build_table
from .graph.tree import ExpandMode, NodeState, compute_tree_state
from .parsing.csv_codec import parse_csv, stringify_csv
from .parsing.envelope import ExtractedTable, extract_table, load_envelope
from .styles.index import StyleIndex

__all__ = [
    "TableOptions", "load_config",
    "DocumentGraph", "ElementNode", "Envelope", "Style", "TextNode",
    "TableGraphBuilder", "build_table",
    "ExpandMode", "NodeState", "compute_tree_state",
    "parse_csv", "stringify_csv",
    "ExtractedTable", "extract_table", "load_envelope",
    "StyleIndex",
]
