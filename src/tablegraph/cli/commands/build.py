"""
Build Command - Generate the XscpData envelope for a table.

Reads an optional CSV file (or stdin), merges flags over the project
config, and writes the envelope JSON to a file or stdout.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import click
from pydantic import BaseModel

from ...config import TableOptions, load_config
from ...core.exceptions import TableGraphError
from ...core.grid import grid_dimensions, is_empty_grid
from ...graph.builder import TableGraphBuilder
from ...parsing.csv_codec import parse_csv
from ..renderers import JsonRenderer
from ..utils import echo_error, echo_info, read_text, write_output

logger = logging.getLogger(__name__)


# --- API Models ---
class BuildSummary(BaseModel):
    """
    Structured response for the build command.
    """
    columns: int
    body_rows: int
    nodes: int
    styles: int
    from_csv: bool
    output_path: str | None = None
    envelope: Dict[str, Any] | None = None


def table_options_flags(func):
    """Shared table-shape and class options (also used by `edit --rebuild`)."""
    options = [
        click.option("--header/--no-header", "include_header", default=None, help="Include a thead section"),
        click.option("--footer/--no-footer", "include_footer", default=None, help="Include a tfoot section"),
        click.option("--table-class", default=None, help="Table classes (space separated)"),
        click.option("--head-class", default=None, help="thead classes"),
        click.option("--body-class", default=None, help="tbody classes"),
        click.option("--foot-class", default=None, help="tfoot classes"),
        click.option("--row-class", default=None, help="tr classes"),
        click.option("--cell-class", default=None, help="td/th classes"),
        click.option("--th/--td", "header_cells_th", default=None, help="Use th cells in the head row"),
        click.option("--role/--no-role", "table_role", default=None, help='Add role="table" to the table'),
        click.option("--span-fallback/--no-span-fallback", default=None,
                     help="Wrap cell text in a span element"),
        click.option("--wrap/--no-wrap", "wrap_in_section", default=None,
                     help="Wrap the table in the section template"),
        click.option("--config", "config_path", default=None, type=click.Path(dir_okay=False),
                     help="Config file (default: .tablegraph/config.yaml)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_options(config_path: str | None, **flags) -> TableOptions:
    """Config file values, overridden by any flag that was given."""
    base = load_config(Path(config_path) if config_path else None)
    return base.merged(**flags)


@click.command()
@click.option("--csv", "csv_file", default=None, help="CSV file to convert ('-' for stdin)")
@click.option("-c", "--columns", type=int, default=None, help="Column count (ignored with --csv)")
@click.option("-r", "--rows", "body_rows", type=int, default=None, help="Body row count (ignored with --csv)")
@click.option("--header-row/--no-header-row", default=None, help="Treat the first CSV row as the header")
@table_options_flags
@click.option("-o", "--output", default=None, help="Output file (default: stdout)")
@click.option("--json", "as_json", is_flag=True, help="Output a JSON summary")
def build(csv_file: str | None, output: str | None, as_json: bool, config_path: str | None, **flags):
    """
    Build a table node graph and print the envelope.

    \b
    Examples:
      tablegraph build -c 4 -r 10 --table-class "w-full border"
      tablegraph build --csv prices.csv --wrap -o table.json
    """
    renderer = JsonRenderer("build")

    try:
        options = resolve_options(config_path, **flags)

        grid = None
        if csv_file:
            grid = parse_csv(read_text(csv_file))
            if is_empty_grid(grid):
                raise TableGraphError(f"CSV contains no data: {csv_file}")
            row_count, col_count = grid_dimensions(grid)
            if not as_json:
                echo_info(f"Loaded CSV: {row_count} rows × {col_count} cols")

        builder = TableGraphBuilder(options)
        shape = builder.shape_for(grid)
        envelope = builder.build(grid)
    except (TableGraphError, OSError) as e:
        if as_json:
            renderer.render_error(e)
        else:
            echo_error(str(e))
        sys.exit(1)

    if as_json:
        if output:
            write_output(envelope.to_json(), output)
        renderer.render_success(BuildSummary(
            columns=shape.columns,
            body_rows=shape.body_rows,
            nodes=len(envelope.nodes),
            styles=len(envelope.styles),
            from_csv=grid is not None,
            output_path=output,
            envelope=None if output else envelope.to_wire(),
        ))
        return

    write_output(envelope.to_json(), output)
