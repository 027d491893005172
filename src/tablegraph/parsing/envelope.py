"""
Envelope reader and graph -> grid extractor.

Reading is lenient and never raises for bad input: `load_envelope` returns
an `Err(ExtractError)` describing why a source holds no usable table, and
`extract_table` collapses that into None ("no data").
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ValidationError

from ..core.graph import AnyNode, DocumentGraph
from ..core.result import Err, Ok, Result
from ..core.types import ElementNode, Envelope, NodeKind

logger = logging.getLogger(__name__)

EnvelopeSource = Union[str, bytes, dict, Envelope]

SECTION_TAGS = ("thead", "tbody", "tfoot")
CELL_TAGS = ("td", "th")


@dataclass
class ExtractError:
    """Structured reason an envelope yielded no table."""
    message: str
    cause: Exception | None = None


class ExtractedTable(BaseModel):
    """
    Grid recovered from a document graph.

    `rows` holds header rows followed by body rows when `has_header` is
    set, else body rows only. Footer rows are never included.
    """
    rows: List[List[str]]
    has_header: bool


def load_envelope(source: EnvelopeSource, require_table: bool = True) -> Result[Envelope, ExtractError]:
    """
    Parse and validate an envelope with a non-empty node list.

    Accepts raw JSON text/bytes, an already-decoded dict, or an Envelope.
    With `require_table`, an envelope without a table element is an Err.
    """
    if isinstance(source, Envelope):
        envelope = source
    else:
        try:
            raw: Any = json.loads(source) if isinstance(source, (str, bytes)) else source
        except ValueError as e:
            return Err(ExtractError(f"Invalid JSON: {e}", cause=e))
        if not isinstance(raw, dict) or not isinstance(raw.get("payload"), dict):
            return Err(ExtractError("Missing payload"))
        try:
            envelope = Envelope.model_validate(raw)
        except ValidationError as e:
            return Err(ExtractError(f"Payload does not match schema: {e.error_count()} error(s)", cause=e))

    if not envelope.nodes:
        return Err(ExtractError("Payload has no nodes"))
    if require_table and DocumentGraph(envelope.nodes).find_first("table") is None:
        return Err(ExtractError("No table element in payload"))
    return Ok(envelope)


def cell_text(node: Optional[AnyNode], graph: DocumentGraph) -> str:
    """
    First non-empty text value found depth-first under `node`.

    Span-wrapped and directly attached text read the same.
    """
    if node is None:
        return ""
    stack = [node]
    seen = set()
    while stack:
        current = stack.pop()
        if current.id in seen:
            continue
        seen.add(current.id)
        if current.kind == NodeKind.TEXT:
            if current.value:
                return current.value
            continue
        # Reverse so the first child is visited first.
        stack.extend(reversed(graph.children_of(current.id)))
    return ""


def _children_tagged(graph: DocumentGraph, node_id: str, tags: tuple) -> List[ElementNode]:
    return [
        child
        for child in graph.children_of(node_id)
        if child.kind == NodeKind.ELEMENT and child.element_tag in tags
    ]


def read_section_rows(section: Optional[ElementNode], graph: DocumentGraph) -> List[List[str]]:
    """Text of every td/th in every tr of a section, in declared order."""
    if section is None:
        return []
    rows = []
    for tr in _children_tagged(graph, section.id, ("tr",)):
        rows.append([cell_text(cell, graph) for cell in _children_tagged(graph, tr.id, CELL_TAGS)])
    return rows


def extract_from_envelope(envelope: Envelope) -> Optional[ExtractedTable]:
    graph = DocumentGraph(envelope.nodes)
    table = graph.find_first("table")
    if table is None:
        return None

    sections = {}
    for child in graph.children_of(table.id):
        if child.kind == NodeKind.ELEMENT and child.element_tag in SECTION_TAGS:
            sections.setdefault(child.element_tag, child)

    head_rows = read_section_rows(sections.get("thead"), graph)
    body_rows = read_section_rows(sections.get("tbody"), graph)
    foot_rows = read_section_rows(sections.get("tfoot"), graph)
    logger.debug(
        f"Extracted {len(head_rows)} head, {len(body_rows)} body, "
        f"{len(foot_rows)} foot row(s) from table {table.id}"
    )

    has_header = len(head_rows) > 0
    rows = head_rows + body_rows if has_header else body_rows
    return ExtractedTable(rows=rows, has_header=has_header)


def extract_table(source: EnvelopeSource) -> Optional[ExtractedTable]:
    """Recover the grid from an envelope, or None when it holds no table."""
    result = load_envelope(source)
    if result.is_err():
        logger.debug(f"No table extracted: {result.unwrap_err().message}")
        return None
    return extract_from_envelope(result.unwrap())
