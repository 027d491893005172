"""
Document graph index backed by rustworkx.

A node list from an envelope is a flat arena: elements reference their
children by id. DocumentGraph indexes such a list without mutating it and
answers the structural questions the extractor and the tree view need:

- id -> node lookup, children resolved in declared order
- child -> parent map (the last declaring parent wins)
- roots (nodes never referenced as a child), in node-list order
- depth from the nearest root, ancestors, cycle and dangling-id checks
"""

import logging
from collections import Counter, defaultdict, deque
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

import rustworkx as rx

from .types import ElementNode, NodeKind, TextNode

logger = logging.getLogger(__name__)

AnyNode = Union[ElementNode, TextNode]


class DocumentGraph:
    """
    Read-only structural index over an ordered node sequence.

    Features:
    - O(1) node lookup via ID-to-Index bimap
    - rustworkx digraph (parent -> child edges) for degree, reachability
      and cycle queries
    """

    def __init__(self, nodes: Iterable[AnyNode] = ()):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}
        self._order: List[str] = []
        self._parent: Dict[str, str] = {}
        self._dangling: List[Tuple[str, str]] = []
        self._duplicates: Set[str] = set()

        for node in nodes:
            self._add_node(node)
        self._link_children()

    def _add_node(self, node: AnyNode) -> None:
        if node.id in self._id_to_idx:
            # Later definitions replace earlier ones, position is kept.
            self._duplicates.add(node.id)
            self._graph[self._id_to_idx[node.id]] = node
            return
        idx = self._graph.add_node(node)
        self._id_to_idx[node.id] = idx
        self._idx_to_id[idx] = node.id
        self._order.append(node.id)

    def _link_children(self) -> None:
        for node_id in self._order:
            node = self.get_node(node_id)
            for child_id in node.children:
                child_idx = self._id_to_idx.get(child_id)
                if child_idx is None:
                    self._dangling.append((node_id, child_id))
                    continue
                self._graph.add_edge(self._id_to_idx[node_id], child_idx, None)
                self._parent[child_id] = node_id
        if self._dangling:
            logger.debug(f"{len(self._dangling)} dangling child reference(s) in graph")

    def get_node(self, node_id: str) -> Optional[AnyNode]:
        """Retrieve a node by ID."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            return None
        return self._graph[idx]

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def children_of(self, node_id: str) -> List[AnyNode]:
        """Resolve a node's children in declared order, skipping unknown ids."""
        node = self.get_node(node_id)
        if node is None:
            return []
        resolved = []
        for child_id in node.children:
            child = self.get_node(child_id)
            if child is not None:
                resolved.append(child)
        return resolved

    def parent_of(self, node_id: str) -> Optional[str]:
        return self._parent.get(node_id)

    @property
    def parent_map(self) -> Dict[str, str]:
        return dict(self._parent)

    def roots(self) -> List[AnyNode]:
        """Nodes not referenced by any other node's children, in list order."""
        return [
            self.get_node(node_id)
            for node_id in self._order
            if self._graph.in_degree(self._id_to_idx[node_id]) == 0
        ]

    def ancestors(self, node_id: str) -> List[str]:
        """Walk the parent map upward from `node_id`, nearest ancestor first."""
        chain: List[str] = []
        seen = {node_id}
        current = self._parent.get(node_id)
        while current is not None and current not in seen:
            chain.append(current)
            seen.add(current)
            current = self._parent.get(current)
        return chain

    def depths(self) -> Dict[str, int]:
        """
        Breadth-first distance from the nearest root.

        Nodes only reachable through a cycle have no depth and are absent
        from the result.
        """
        depth: Dict[str, int] = {}
        queue = deque((root.id, 0) for root in self.roots())
        while queue:
            node_id, level = queue.popleft()
            if node_id in depth:
                continue
            depth[node_id] = level
            for child in self.children_of(node_id):
                if child.id not in depth:
                    queue.append((child.id, level + 1))
        return depth

    def find_first(self, tag: str) -> Optional[ElementNode]:
        """First element (in list order) whose normalized tag equals `tag`."""
        wanted = tag.lower()
        for node in self.iter_nodes():
            if node.kind == NodeKind.ELEMENT and node.element_tag == wanted:
                return node
        return None

    def dangling_references(self) -> List[Tuple[str, str]]:
        """(parent_id, missing_child_id) pairs."""
        return list(self._dangling)

    def has_cycle(self) -> bool:
        return not rx.is_directed_acyclic_graph(self._graph)

    def validate(self) -> List[str]:
        """Return human-readable structural problems; empty means valid."""
        problems = []
        for parent_id, child_id in self._dangling:
            problems.append(f"{parent_id} references missing child {child_id}")
        for node_id in sorted(self._duplicates):
            problems.append(f"duplicate node id {node_id}")
        if self.has_cycle():
            problems.append("children links contain a cycle")
        for node in self.iter_nodes():
            if node.kind == NodeKind.TEXT and (node.children or node.classes):
                problems.append(f"text node {node.id} has children or classes")
        return problems

    def iter_nodes(self) -> Iterator[AnyNode]:
        for node_id in self._order:
            yield self.get_node(node_id)

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._id_to_idx

    def get_stats(self) -> Dict[str, Any]:
        tag_counts: Dict[str, int] = defaultdict(int)
        for node in self.iter_nodes():
            tag_counts[node.element_tag or "#text"] += 1
        kinds = Counter(node.kind.value for node in self.iter_nodes())

        return {
            "total_nodes": self.node_count,
            "total_links": self.edge_count,
            "nodes_by_kind": dict(kinds),
            "nodes_by_tag": dict(tag_counts),
            "roots": len(self.roots()),
            "dangling": len(self._dangling),
            "backend": "rustworkx",
        }
