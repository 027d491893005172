"""
Tree traversal engine for graph inspection.

Computes, for every node, whether it matches a search query, whether it is
an ancestor of a match, and whether a tree view should show it expanded.
The computation is a pure function of (nodes, styles, query, mode); it
never mutates the graph and holds no state between calls.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, Iterable, List, Sequence, Set

from ..core.graph import AnyNode, DocumentGraph
from ..core.types import Style

logger = logging.getLogger(__name__)


class ExpandMode(StrEnum):
    """How the tree view decides which nodes are open."""
    AUTO = "auto"
    ALL = "all"
    COLLAPSE = "collapse"


@dataclass(frozen=True)
class NodeState:
    node_id: str
    depth: int | None
    is_match: bool
    is_ancestor: bool
    open: bool

    @property
    def is_root(self) -> bool:
        return self.depth == 0


def class_name_map(styles: Iterable[Style]) -> Dict[str, str]:
    """Style id -> style name."""
    return {style.id: style.name for style in styles}


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def class_names_of(node: AnyNode, names_by_id: Dict[str, str]) -> List[str]:
    return [names_by_id[cid] for cid in node.classes if cid in names_by_id]


def find_matches(graph: DocumentGraph, names_by_id: Dict[str, str], query: str) -> Set[str]:
    """Ids of nodes whose tag or any class name contains `query`."""
    q = normalize_query(query)
    if not q:
        return set()
    matches = set()
    for node in graph.iter_nodes():
        if q in node.element_tag:
            matches.add(node.id)
            continue
        if any(q in name.lower() for name in class_names_of(node, names_by_id)):
            matches.add(node.id)
    return matches


def find_ancestors(graph: DocumentGraph, matches: Iterable[str]) -> Set[str]:
    """Every node on a parent chain above a match, each added once."""
    parents = graph.parent_map
    ancestors: Set[str] = set()
    for node_id in matches:
        current = parents.get(node_id)
        while current is not None and current not in ancestors:
            ancestors.add(current)
            current = parents.get(current)
    return ancestors


def is_open(mode: ExpandMode, is_match: bool, is_ancestor: bool, depth: int | None) -> bool:
    if mode == ExpandMode.ALL:
        return True
    if mode == ExpandMode.COLLAPSE:
        return False
    return is_match or is_ancestor or depth == 0


def compute_tree_state(
    nodes: Sequence[AnyNode] | DocumentGraph,
    styles: Iterable[Style] = (),
    query: str | None = "",
    mode: ExpandMode | str = ExpandMode.AUTO,
) -> Dict[str, NodeState]:
    """
    Per-node open/closed and highlight decisions.

    Args:
        nodes: The full node sequence (or an already-built DocumentGraph).
        styles: Styles used to resolve class ids to names for matching.
        query: Case-insensitive substring; empty means no matches.
        mode: auto | all | collapse.

    Returns:
        Dict[str, NodeState]: One entry per node id.
    """
    graph = nodes if isinstance(nodes, DocumentGraph) else DocumentGraph(nodes)
    expand = ExpandMode(mode)
    names_by_id = class_name_map(styles)

    matches = find_matches(graph, names_by_id, query or "")
    ancestors = find_ancestors(graph, matches)
    depths = graph.depths()

    states = {}
    for node in graph.iter_nodes():
        depth = depths.get(node.id)
        is_match = node.id in matches
        is_ancestor = node.id in ancestors
        states[node.id] = NodeState(
            node_id=node.id,
            depth=depth,
            is_match=is_match,
            is_ancestor=is_ancestor,
            open=is_open(expand, is_match, is_ancestor, depth),
        )

    logger.debug(
        f"Tree state: {len(matches)} match(es), {len(ancestors)} ancestor(s), "
        f"mode={expand.value}"
    )
    return states
