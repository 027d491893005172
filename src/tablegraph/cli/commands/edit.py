"""
Edit Command - Round-trip cell edits.

Extracts the grid from an envelope, applies `--set ROW COL VALUE` edits,
and prints the edited CSV, or rebuilds a fresh envelope from it.
"""

import logging
import sys
from typing import Tuple

import click

from ...core.exceptions import TableGraphError
from ...core.grid import set_cell
from ...graph.builder import TableGraphBuilder
from ...parsing.csv_codec import stringify_csv
from ...parsing.envelope import extract_from_envelope
from ..utils import echo_error, echo_info, load_table_envelope, write_output
from .build import resolve_options, table_options_flags

logger = logging.getLogger(__name__)


@click.command()
@click.argument("envelope")
@click.option("--set", "edits", type=(int, int, str), multiple=True,
              metavar="ROW COL VALUE", help="Cell edit (0-based, header row is row 0)")
@click.option("--rebuild", is_flag=True, help="Emit a rebuilt envelope instead of CSV")
@table_options_flags
@click.option("-o", "--output", default=None, help="Output file (default: stdout)")
def edit(envelope: str, edits: Tuple[Tuple[int, int, str], ...], rebuild: bool,
         output: str | None, config_path: str | None, **flags):
    """
    Edit cells of the table in ENVELOPE.
    """
    try:
        table = extract_from_envelope(load_table_envelope(envelope))
        rows = table.rows
        for row, col, value in edits:
            rows = set_cell(rows, row, col, value)
        logger.debug(f"Applied {len(edits)} edit(s)")

        if not rebuild:
            content = stringify_csv(rows)
        else:
            # The grid's header flag comes from the source envelope.
            flags["header_row"] = table.has_header
            if flags.get("include_header") is None:
                flags["include_header"] = table.has_header
            options = resolve_options(config_path, **flags)
            content = TableGraphBuilder(options).build(rows).to_json()
            echo_info(f"Rebuilt envelope from {len(rows)} row(s)")
    except TableGraphError as e:
        echo_error(str(e))
        sys.exit(1)

    write_output(content, output)
