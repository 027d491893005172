"""
Core type definitions for tablegraph.

Models mirror the Webflow XscpData clipboard schema. Field names are
Pythonic; aliases carry the destination schema's wire names so that
`model_dump(by_alias=True)` produces a payload the design tool accepts.
"""

import uuid
from enum import StrEnum
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator

ENVELOPE_FORMAT = "@webflow/XscpData"


def make_id(prefix: str = "") -> str:
    """Allocate a process-unique identifier with the given prefix."""
    return f"{prefix}{uuid.uuid4().hex[:16]}"


class NodeKind(StrEnum):
    """The two kinds of node in a document graph."""
    ELEMENT = "element"
    TEXT = "text"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Attribute(_WireModel):
    name: str
    value: str = ""


class NodeData(_WireModel):
    """Element payload. `tag` holds the real HTML tag; empty defers to the node's own `tag`."""
    tag: str = ""
    attributes: List[Attribute] = Field(default_factory=list)
    slot: str = ""
    text: bool = False


class ElementNode(_WireModel):
    """
    An element in the arena.

    Children are referenced by id only; resolve them through the owning
    graph.
    """
    id: str = Field(alias="_id")
    type: str = "DOM"
    tag: str = "div"
    classes: List[str] = Field(default_factory=list)
    children: List[str] = Field(default_factory=list)
    data: NodeData = Field(default_factory=NodeData)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.ELEMENT

    @property
    def element_tag(self) -> str:
        """Normalized tag: `data.tag` wins over the generic top-level tag."""
        return (self.data.tag or self.tag or "").lower()

    @property
    def attributes(self) -> List[Attribute]:
        return self.data.attributes

    @classmethod
    def create(
        cls,
        tag: str,
        classes: List[str] | None = None,
        attributes: List[Attribute] | None = None,
    ) -> "ElementNode":
        return cls(
            id=make_id("n_"),
            classes=list(classes or []),
            data=NodeData(tag=tag, attributes=list(attributes or [])),
        )


class TextNode(_WireModel):
    """A standalone text node: `{_id, text: true, v}`."""
    id: str = Field(alias="_id")
    text: Literal[True] = True
    value: str = Field("", alias="v")

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TEXT

    @property
    def element_tag(self) -> str:
        return ""

    @property
    def children(self) -> List[str]:
        return []

    @property
    def classes(self) -> List[str]:
        return []

    @property
    def attributes(self) -> List[Attribute]:
        return []

    @classmethod
    def create(cls, value: Any = "") -> "TextNode":
        return cls(id=make_id("t_"), value=value)


def _node_discriminator(raw: Any) -> str:
    if isinstance(raw, dict):
        return NodeKind.TEXT.value if raw.get("text") is True else NodeKind.ELEMENT.value
    return getattr(raw, "kind", NodeKind.ELEMENT).value


Node = Annotated[
    Union[
        Annotated[ElementNode, Tag(NodeKind.ELEMENT.value)],
        Annotated[TextNode, Tag(NodeKind.TEXT.value)],
    ],
    Discriminator(_node_discriminator),
]


class StyleVariant(_WireModel):
    declaration: str = Field("", alias="styleLess")


class Style(_WireModel):
    """
    A named class style.

    `name` is the dedup key within a graph; `declaration` is resolved
    CSS-like text (possibly empty).
    """
    id: str = Field(alias="_id")
    fake: bool = False
    type: str = "class"
    name: str
    namespace: str = ""
    comb: str = ""
    declaration: str = Field("", alias="styleLess")
    variants: Dict[str, StyleVariant] = Field(default_factory=dict)
    children: List[str] = Field(default_factory=list)
    created_by: str | None = Field(None, alias="createdBy")
    origin: str | None = None
    selector: str | None = None


class Interactions(_WireModel):
    interactions: List[Any] = Field(default_factory=list)
    events: List[Any] = Field(default_factory=list)
    action_lists: List[Any] = Field(default_factory=list, alias="actionLists")


class Payload(_WireModel):
    nodes: List[Node] = Field(default_factory=list)
    styles: List[Style] = Field(default_factory=list)
    assets: List[Any] = Field(default_factory=list)
    ix1: List[Any] = Field(default_factory=list)
    ix2: Interactions = Field(default_factory=Interactions)


class Meta(_WireModel):
    """Pass-through counters required by the destination schema."""
    dropped_links: int = Field(0, alias="droppedLinks")
    dyn_bind_removed_count: int = Field(0, alias="dynBindRemovedCount")
    dyn_list_bind_removed_count: int = Field(0, alias="dynListBindRemovedCount")
    pagination_removed_count: int = Field(0, alias="paginationRemovedCount")
    universal_bindings_removed_count: int = Field(0, alias="universalBindingsRemovedCount")
    unlinked_symbol_count: int = Field(0, alias="unlinkedSymbolCount")
    code_components_removed_count: int = Field(0, alias="codeComponentsRemovedCount")


class Envelope(_WireModel):
    """Top-level clipboard document wrapping payload and meta."""
    type: str = ENVELOPE_FORMAT
    payload: Payload = Field(default_factory=Payload)
    meta: Meta = Field(default_factory=Meta)

    @property
    def nodes(self) -> List[Union[ElementNode, TextNode]]:
        return self.payload.nodes

    @property
    def styles(self) -> List[Style]:
        return self.payload.styles

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
