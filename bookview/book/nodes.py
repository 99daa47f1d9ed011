"""
Book content schema - the document tree the reader renders.

The tree is made of nodes (paragraphs, titles, groups, lists, tables,
separators, images) whose inline content is span markup. Both sets are
closed: every consumer dispatches over exactly these variants.

Spans follow the booka encoding where a plain string is a simple span:

    CompoundSpan(spans=[
        "Call me ",
        AttrSpan(content="Ishmael", attrs=["italic"]),
        ".",
    ])

Documents are plain pydantic models, so a serialized book is loaded with
`BookDocument.model_validate_json(raw)`.
"""

from __future__ import annotations
from typing import Annotated, Literal, Union
from pydantic import BaseModel, Field


# =============================================================================
# Semantics and images
# =============================================================================

class Semantic(BaseModel):
    """Semantic annotation on a node or span (e.g. a footnote with its title)."""
    semantic: str
    title: list[str] = Field(default_factory=list)


class ImageRef(BaseModel):
    """Reference to an entry of the image dictionary."""
    image_id: str


class ImageData(BaseModel):
    """Resolved image, as stored in the image dictionary."""
    src: str
    title: str | None = None


# =============================================================================
# Spans
# =============================================================================

AttributeName = Literal["italic", "bold", "line", "small", "big", "quote", "poem"]


class CompoundSpan(BaseModel):
    span: Literal["compound"] = "compound"
    spans: list[Span]


class AttrSpan(BaseModel):
    span: Literal["attrs"] = "attrs"
    content: Span
    attrs: list[AttributeName]


class RefSpan(BaseModel):
    span: Literal["ref"] = "ref"
    content: Span
    ref_to_id: str


class ImageSpan(BaseModel):
    span: Literal["image"] = "image"
    image: ImageRef


class SemanticSpan(BaseModel):
    span: Literal["semantic"] = "semantic"
    content: Span
    semantics: list[Semantic]


Span = Union[str, CompoundSpan, AttrSpan, RefSpan, ImageSpan, SemanticSpan]


# =============================================================================
# Nodes
# =============================================================================

class ParagraphNode(BaseModel):
    node: Literal["pph"] = "pph"
    span: Span
    ref_id: str | None = None


class TitleNode(BaseModel):
    """
    Chapter or section heading.

    level 0 is the top title, positive levels are nested headings and
    negative levels are footnote-style labels.
    """
    node: Literal["title"] = "title"
    lines: list[str]
    level: int = 0
    ref_id: str | None = None


class GroupNode(BaseModel):
    node: Literal["group"] = "group"
    nodes: list[BookNode] = Field(default_factory=list)
    semantics: list[Semantic] = Field(default_factory=list)
    ref_id: str | None = None


class ListItem(BaseModel):
    item: Span


class ListNode(BaseModel):
    node: Literal["list"] = "list"
    kind: Literal["basic", "ordered"] = "basic"
    items: list[ListItem] = Field(default_factory=list)
    ref_id: str | None = None


class TableRow(BaseModel):
    cells: list[Span] = Field(default_factory=list)


class TableNode(BaseModel):
    node: Literal["table"] = "table"
    rows: list[TableRow] = Field(default_factory=list)
    ref_id: str | None = None


class SeparatorNode(BaseModel):
    node: Literal["separator"] = "separator"
    ref_id: str | None = None


class ImageNode(BaseModel):
    node: Literal["image"] = "image"
    image: ImageRef
    ref_id: str | None = None


class IgnoreNode(BaseModel):
    """Inert content kept for index stability (it occupies a path slot)."""
    node: Literal["ignore"] = "ignore"
    ref_id: str | None = None


BookNode = Annotated[
    Union[
        ParagraphNode,
        TitleNode,
        GroupNode,
        ListNode,
        TableNode,
        SeparatorNode,
        ImageNode,
        IgnoreNode,
    ],
    Field(discriminator="node"),
]


class BookDocument(BaseModel):
    """A book's content nodes together with its image dictionary."""
    nodes: list[BookNode] = Field(default_factory=list)
    images: dict[str, ImageData] = Field(default_factory=dict)


for _model in (CompoundSpan, AttrSpan, RefSpan, SemanticSpan, ParagraphNode, GroupNode, ListItem, TableRow, BookDocument):
    _model.model_rebuild()


def has_semantic(node: GroupNode | SemanticSpan, name: str) -> Semantic | None:
    """Return the node's semantic with the given name, if present."""
    for semantic in node.semantics:
        if semantic.semantic == name:
            return semantic
    return None
