"""
Rich renderers for the inspection tree and node details.
"""

from typing import Dict, Iterable, Optional, Set

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ..core.graph import AnyNode, DocumentGraph
from ..core.types import NodeKind, Style
from .inspector import NodeDetails, display_tag
from .tree import NodeState, class_name_map, class_names_of

TEXT_PREVIEW_LIMIT = 40

TAG_COLORS: Dict[str, str] = {
    "table": "slate_blue1",
    "thead": "blue",
    "tbody": "green",
    "tfoot": "magenta",
    "tr": "yellow",
    "th": "hot_pink",
    "td": "grey70",
    "span": "grey50",
}


def text_preview(value: str, limit: int = TEXT_PREVIEW_LIMIT) -> str:
    if len(value) > limit:
        return value[: limit - 3] + "…"
    return value


def node_label(
    node: AnyNode,
    names_by_id: Dict[str, str],
    state: Optional[NodeState] = None,
    selected: bool = False,
) -> Text:
    tag = display_tag(node)
    label = Text()
    label.append(f"<{tag}>", style=TAG_COLORS.get(tag, "white"))

    class_names = class_names_of(node, names_by_id)
    if class_names:
        label.append(" ." + ".".join(class_names), style="dim")
    if node.kind == NodeKind.TEXT and node.value:
        label.append(f" “{text_preview(node.value)}”", style="italic dim")

    if state is not None and state.is_match:
        label.stylize("bold reverse")
    if selected:
        label.stylize("on grey23")
        label.append("  ◀", style="cyan")
    return label


def render_tree(
    graph: DocumentGraph,
    styles: Iterable[Style],
    states: Dict[str, NodeState],
    selected_id: str | None = None,
    title: str = "Document graph",
) -> Tree:
    """Render roots and their open subtrees; closed nodes show a child count."""
    names_by_id = class_name_map(styles)
    tree = Tree(Text(title, style="bold"))

    def add(branch: Tree, node: AnyNode, path: Set[str]) -> None:
        state = states.get(node.id)
        sub = branch.add(node_label(node, names_by_id, state, node.id == selected_id))
        children = graph.children_of(node.id)
        if not children:
            return
        if state is not None and not state.open:
            sub.add(Text(f"… {len(children)} child node(s)", style="dim"))
            return
        for child in children:
            if child.id in path:
                sub.add(Text(f"↻ cycle to {child.id}", style="red"))
                continue
            add(sub, child, path | {child.id})

    for root in graph.roots():
        add(tree, root, {root.id})
    return tree


def render_details(details: NodeDetails) -> Table:
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("field", style="bold")
    table.add_column("value")

    table.add_row("ID", details.node_id)
    table.add_row("Tag", details.tag)
    if details.classes:
        table.add_row("Classes", "\n".join(f"{name} [{sid}]" for name, sid in details.classes))
    else:
        table.add_row("Classes", Text("(none)", style="dim"))
    table.add_row("Children", str(details.child_count))
    if details.attributes:
        table.add_row("Attributes", "\n".join(f"{k} = {v}" for k, v in details.attributes))
    if details.text is not None:
        table.add_row("Text", details.text)
    return table
