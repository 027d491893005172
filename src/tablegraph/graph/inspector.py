"""
Node inspector: a flat description of one node for display.
"""

from typing import Any, Dict, Iterable, List, Tuple

from pydantic import BaseModel, Field

from ..core.exceptions import NodeNotFoundError
from ..core.graph import DocumentGraph
from ..core.types import NodeKind, Style

UNKNOWN_CLASS = "(unknown)"


class NodeDetails(BaseModel):
    node_id: str
    tag: str
    classes: List[Tuple[str, str]] = Field(default_factory=list)  # (name, style id)
    child_count: int = 0
    attributes: List[Tuple[str, str]] = Field(default_factory=list)
    text: str | None = None
    raw: Dict[str, Any] = Field(default_factory=dict)


def display_tag(node) -> str:
    if node.kind == NodeKind.TEXT:
        return "#text"
    return node.element_tag or "div"


def describe_node(graph: DocumentGraph, styles: Iterable[Style], node_id: str) -> NodeDetails:
    """Raises NodeNotFoundError if `node_id` is not in the graph."""
    node = graph.get_node(node_id)
    if node is None:
        raise NodeNotFoundError(node_id)

    names = {style.id: style.name for style in styles}
    return NodeDetails(
        node_id=node.id,
        tag=display_tag(node),
        classes=[(names.get(cid, UNKNOWN_CLASS), cid) for cid in node.classes],
        child_count=len(node.children),
        attributes=[(a.name, a.value) for a in node.attributes],
        text=node.value if node.kind == NodeKind.TEXT else None,
        raw=node.to_wire(),
    )
