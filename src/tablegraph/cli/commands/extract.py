"""
Extract Command - Recover the grid from an envelope.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import TableGraphError
from ...core.grid import column_count, pad_grid
from ...parsing.csv_codec import stringify_csv
from ...parsing.envelope import ExtractedTable, extract_from_envelope
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_warning, load_table_envelope


def grid_table(table: ExtractedTable) -> Table:
    """Rich table preview: row 0 becomes the header when present."""
    width = column_count(table.rows)
    rows = pad_grid(table.rows, width)
    view = Table(show_header=table.has_header, header_style="bold")

    header = rows[0] if table.has_header and rows else [""] * width
    for title in header:
        view.add_column(title, no_wrap=True)
    for row in rows[1:] if table.has_header else rows:
        view.add_row(*row)
    return view


@click.command()
@click.argument("envelope")
@click.option("-f", "--format", "fmt", type=click.Choice(["table", "csv", "json"]), default="table",
              help="Output format")
def extract(envelope: str, fmt: str):
    """
    Print the table stored in an envelope JSON file ('-' for stdin).
    """
    renderer = JsonRenderer("extract")
    try:
        table = extract_from_envelope(load_table_envelope(envelope))
    except TableGraphError as e:
        if fmt == "json":
            renderer.render_error(e)
        else:
            echo_error(str(e))
        sys.exit(1)

    if fmt == "json":
        renderer.render_success(table)
    elif fmt == "csv":
        click.echo(stringify_csv(table.rows))
    else:
        if not table.rows:
            echo_warning("No table data")
            return
        Console().print(grid_table(table))
