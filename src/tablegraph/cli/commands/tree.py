"""
Tree Command - Browse the node graph of an envelope.

Search matches tags and class names; matched nodes and their ancestors
open in auto mode.
"""

import sys

import click
from rich.console import Console

from ...core.exceptions import TableGraphError
from ...core.graph import DocumentGraph
from ...graph.render import render_tree
from ...graph.tree import ExpandMode, compute_tree_state
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_info, load_table_envelope


@click.command()
@click.argument("envelope")
@click.option("-s", "--search", default="", help="Tag or class substring, e.g. td, tbody, table_component")
@click.option("-e", "--expand", type=click.Choice([m.value for m in ExpandMode]), default=ExpandMode.AUTO.value,
              help="Expand mode")
@click.option("--select", "selected_id", default=None, help="Node id to highlight")
@click.option("--json", "as_json", is_flag=True, help="Output per-node state as JSON")
def tree(envelope: str, search: str, expand: str, selected_id: str | None, as_json: bool):
    """
    Show the node tree of ENVELOPE ('-' for stdin).
    """
    renderer = JsonRenderer("tree")
    try:
        loaded = load_table_envelope(envelope, require_table=False)
    except TableGraphError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        sys.exit(1)

    graph = DocumentGraph(loaded.nodes)
    states = compute_tree_state(graph, loaded.styles, search, expand)

    if as_json:
        renderer.render_success({
            "stats": graph.get_stats(),
            "nodes": {
                node_id: {
                    "depth": state.depth,
                    "match": state.is_match,
                    "ancestor": state.is_ancestor,
                    "open": state.open,
                }
                for node_id, state in states.items()
            },
        })
        return

    Console().print(render_tree(graph, loaded.styles, states, selected_id=selected_id))
    if search.strip():
        matched = sum(1 for s in states.values() if s.is_match)
        echo_info(f"{matched} node(s) match '{search.strip()}'")
