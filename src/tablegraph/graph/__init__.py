"""
Graph construction and inspection.
"""

from .builder import BuildContext, TableGraphBuilder, TableShape, build_table
from .inspector import NodeDetails, describe_node
from .tree import ExpandMode, NodeState, compute_tree_state

__all__ = [
    "BuildContext", "TableGraphBuilder", "TableShape", "build_table",
    "NodeDetails", "describe_node",
    "ExpandMode", "NodeState", "compute_tree_state",
]
