"""
Readers and codecs: CSV text <-> grid, envelope -> grid.
"""

from .csv_codec import parse_csv, stringify_csv
from .envelope import (
    ExtractError, ExtractedTable, cell_text, extract_from_envelope,
    extract_table, load_envelope,
)

__all__ = [
    "parse_csv", "stringify_csv",
    "ExtractError", "ExtractedTable", "cell_text", "extract_from_envelope",
    "extract_table", "load_envelope",
]
