"""
Inspect Command - Show one node's tag, classes, attributes and text.
"""

import json
import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from ...core.exceptions import TableGraphError
from ...core.graph import DocumentGraph
from ...graph.inspector import describe_node
from ...graph.render import render_details
from ..renderers import JsonRenderer
from ..utils import echo_error, load_table_envelope


@click.command()
@click.argument("envelope")
@click.argument("node_id")
@click.option("--raw", is_flag=True, help="Also print the node's raw JSON")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def inspect(envelope: str, node_id: str, raw: bool, as_json: bool):
    """
    Inspect NODE_ID in ENVELOPE.
    """
    renderer = JsonRenderer("inspect")
    try:
        loaded = load_table_envelope(envelope, require_table=False)
        details = describe_node(DocumentGraph(loaded.nodes), loaded.styles, node_id)
    except TableGraphError as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        sys.exit(1)

    if as_json:
        renderer.render_success(details)
        return

    console = Console()
    console.print(Panel.fit(render_details(details), title=f"<{details.tag}>", border_style="blue"))
    if raw:
        console.print(Syntax(json.dumps(details.raw, indent=2), "json"))
