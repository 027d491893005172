"""
Node-graph builder: grid + table options -> envelope.

Every build allocates a fresh node list and a fresh StyleIndex, threads both
through the construction helpers, and wraps the result in the XscpData
envelope. Nothing is shared between builds.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from ..config import TableOptions
from ..core.grid import column_count
from ..core.types import (
    Attribute, ElementNode, Envelope, Payload, TextNode,
)
from ..styles.index import StyleIndex
from ..styles.tokens import (
    WRAPPER_CHAIN, PresetResolver, StyleResolver, preset_for, resolve_style,
)

logger = logging.getLogger(__name__)

AnyNode = Union[ElementNode, TextNode]
SourceGrid = Sequence[Sequence[str]]


@dataclass
class BuildContext:
    """Mutable state owned by a single build call."""
    styles: StyleIndex
    nodes: List[AnyNode] = field(default_factory=list)

    def push(self, node: AnyNode) -> AnyNode:
        self.nodes.append(node)
        return node

    def element(self, tag: str, class_names: Sequence[str] = (), attributes=None) -> ElementNode:
        node = ElementNode.create(tag, classes=self.styles.class_ids(class_names), attributes=attributes)
        self.push(node)
        return node


@dataclass
class TableShape:
    """Resolved dimensions for one build."""
    columns: int
    body_rows: int


class TableGraphBuilder:
    """
    Builds a table document graph.

    The style resolver and preset lookup are injectable so callers can
    supply their own design-token tables.
    """

    def __init__(
        self,
        options: TableOptions | None = None,
        resolver: StyleResolver = resolve_style,
        presets: PresetResolver = preset_for,
    ):
        self.options = options or TableOptions()
        self._resolver = resolver
        self._presets = presets

    def shape_for(self, grid: Optional[SourceGrid]) -> TableShape:
        """Grid dimensions win over the configured counts."""
        if grid is None:
            return TableShape(
                columns=max(self.options.columns, 0),
                body_rows=max(self.options.body_rows, 0),
            )
        body_rows = len(grid) - 1 if self.options.header_row else len(grid)
        return TableShape(columns=column_count(grid), body_rows=max(body_rows, 0))

    def build(self, grid: Optional[SourceGrid] = None) -> Envelope:
        """
        Build the envelope for `grid`, or an empty table of the configured
        size when no grid is given.
        """
        opts = self.options
        ctx = BuildContext(styles=StyleIndex(self._resolver, self._presets))
        shape = self.shape_for(grid)

        # 1. Table element
        attributes = [Attribute(name="role", value="table")] if opts.table_role else []
        table = ctx.element("table", [opts.table_class], attributes)

        # 2. Sections and rows
        thead = None
        if opts.include_header:
            thead = ctx.element("thead", [opts.head_class])
            source = grid[0] if grid else None
            thead.children.append(self._make_row(ctx, "thead", shape, grid, source).id)

        tbody = ctx.element("tbody", [opts.body_class])
        for r in range(shape.body_rows):
            source = self._body_source_row(grid, r)
            tbody.children.append(self._make_row(ctx, "tbody", shape, grid, source).id)

        tfoot = None
        if opts.include_footer:
            tfoot = ctx.element("tfoot", [opts.foot_class])
            # Footer cells are never populated from the grid.
            tfoot.children.append(self._make_row(ctx, "tfoot", shape, None, None).id)

        # 3. Fixed section order, independent of creation order
        for section in (thead, tbody, tfoot):
            if section is not None:
                table.children.append(section.id)

        # 4. Optional wrapper chain
        if opts.wrap_in_section:
            self._wrap(ctx, table)

        logger.debug(
            f"Built table: {shape.columns} col(s), {shape.body_rows} body row(s), "
            f"{len(ctx.nodes)} node(s), {len(ctx.styles)} style(s)"
        )
        return Envelope(payload=Payload(nodes=ctx.nodes, styles=ctx.styles.styles))

    def _body_source_row(self, grid: Optional[SourceGrid], r: int) -> Optional[Sequence[str]]:
        if grid is None:
            return None
        index = r + 1 if self.options.header_row else r
        return grid[index] if index < len(grid) else None

    def _make_row(
        self,
        ctx: BuildContext,
        section_tag: str,
        shape: TableShape,
        grid: Optional[SourceGrid],
        source_row: Optional[Sequence[str]],
    ) -> ElementNode:
        opts = self.options
        tr = ctx.element("tr", [opts.row_class])
        cell_tag = "th" if section_tag == "thead" and opts.header_cells_th else "td"

        for c in range(shape.columns):
            cell = ctx.element(cell_tag, [opts.cell_class])
            if grid is not None:
                value = ""
                if source_row is not None and c < len(source_row):
                    value = source_row[c] if source_row[c] is not None else ""
                cell.children.append(self._text_child(ctx, value).id)
            tr.children.append(cell.id)
        return tr

    def _text_child(self, ctx: BuildContext, value: str) -> AnyNode:
        text = ctx.push(TextNode.create(value))
        if not self.options.span_fallback:
            return text
        span = ctx.element("span")
        span.children.append(text.id)
        return span

    def _wrap(self, ctx: BuildContext, table: ElementNode) -> ElementNode:
        """Place the table under the five-level section template."""
        wrappers = [ctx.element("div", [name]) for name in WRAPPER_CHAIN]
        for parent, child in zip(wrappers, wrappers[1:]):
            parent.children.append(child.id)
        wrappers[-1].children.append(table.id)
        return wrappers[0]


def build_table(
    grid: Optional[SourceGrid] = None,
    options: TableOptions | None = None,
    **overrides,
) -> Envelope:
    """Convenience wrapper: `build_table(grid, columns=2, include_footer=True)`."""
    opts = options or TableOptions()
    if overrides:
        opts = opts.merged(**overrides)
    return TableGraphBuilder(opts).build(grid)
