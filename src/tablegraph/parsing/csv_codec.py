"""
Comma-delimited text <-> grid codec.

Quote-aware and total: any input text produces a grid. The parser follows
the RFC 4180 conventions that matter for pasted spreadsheet data:

- a field may be wrapped in double quotes; inside quotes `""` is a literal
  quote and every other character (comma, newline) is literal
- outside quotes `,` ends a field, `\\n` ends a row, `\\r` is dropped
- the final row is emitted only if it has more than one field or its single
  field is non-empty, so a terminating newline does not add an empty row

On output a cell is quoted when it holds a quote, comma or newline, and also
when it holds `\\r`, which the parser would otherwise drop.
"""

import logging
import re
from typing import Iterable, List, Sequence

from ..core.grid import Grid

logger = logging.getLogger(__name__)

_NEEDS_QUOTES = re.compile(r'[",\n\r]')


def parse_csv(text: str) -> Grid:
    rows: Grid = []
    row: List[str] = []
    field: List[str] = []
    in_quotes = False
    i = 0
    length = len(text)

    while i < length:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < length and text[i + 1] == '"':
                    field.append('"')
                    i += 2
                    continue
                in_quotes = False
            else:
                field.append(ch)
            i += 1
            continue

        if ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\n":
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        elif ch != "\r":
            field.append(ch)
        i += 1

    row.append("".join(field))
    if len(row) > 1 or row[0] != "":
        rows.append(row)

    logger.debug(f"Parsed CSV: {len(rows)} row(s) from {length} chars")
    return rows


def _encode_cell(cell: str | None) -> str:
    value = "" if cell is None else str(cell)
    escaped = value.replace('"', '""')
    if _NEEDS_QUOTES.search(value):
        return f'"{escaped}"'
    return escaped


def stringify_csv(grid: Iterable[Sequence[str]]) -> str:
    """Serialize a grid; rows are joined with `\\n` and no trailing newline."""
    return "\n".join(",".join(_encode_cell(cell) for cell in row) for row in grid)
