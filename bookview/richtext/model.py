"""
Rich text model - the flat, renderable output of the reader.

A RichTextBlock is one vertically stacked unit of the rendered book
(paragraph, title, list, table, rule). Its content is an ordered list of
fragments: styled text runs, images, lists, tables and rules.

Fragments are addressed by character offset inside their block. Text
contributes its length, an image counts as one position, lists and tables
count their nested content and a rule takes no room at all.
"""

from __future__ import annotations
from typing import Annotated, Iterator, Literal, Sequence, Union
from pydantic import BaseModel, Field

from ..utils.type_utils import assert_never


Color = str


class RichTextAttrs(BaseModel):
    """
    Sparse set of style attributes for a text run.

    Unset attributes are None. Merging is right-biased: attributes set on
    the incoming set win over the existing ones.
    """
    model_config = {"frozen": True}

    color: Color | None = None
    hover_color: Color | None = None
    background: Color | None = None
    font_size: float | None = None
    font_family: str | None = None
    drop_caps: bool | None = None
    italic: bool | None = None
    bold: bool | None = None
    letter_spacing: float | None = None
    line: bool | None = None
    ref: str | None = None

    def merge(self, other: RichTextAttrs) -> RichTextAttrs:
        """Overlay `other` on top of these attributes."""
        update = other.model_dump(exclude_none=True)
        if not update:
            return self
        return self.model_copy(update=update)

    @property
    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.model_dump(exclude_none=True).items())
        return f"RichTextAttrs({fields})"


# =============================================================================
# Fragments
# =============================================================================

class TextFragment(BaseModel):
    model_config = {"frozen": True}

    frag: Literal["text"] = "text"
    text: str
    attrs: RichTextAttrs = Field(default_factory=RichTextAttrs)

    def with_text(self, text: str) -> TextFragment:
        """Same attributes, different text."""
        return TextFragment(text=text, attrs=self.attrs)

    def with_attrs(self, attrs: RichTextAttrs) -> TextFragment:
        """Same text with `attrs` merged on top."""
        return TextFragment(text=self.text, attrs=self.attrs.merge(attrs))

    def __repr__(self) -> str:
        if self.attrs.is_empty:
            return f"TextFragment({self.text!r})"
        return f"TextFragment({self.text!r}, {self.attrs!r})"


class ImageFragment(BaseModel):
    model_config = {"frozen": True}

    frag: Literal["image"] = "image"
    src: str
    title: str | None = None


class ListFragment(BaseModel):
    model_config = {"frozen": True}

    frag: Literal["list"] = "list"
    kind: Literal["ordered", "unordered"] = "unordered"
    items: tuple[tuple[RichTextFragment, ...], ...] = ()


class TableFragment(BaseModel):
    model_config = {"frozen": True}

    frag: Literal["table"] = "table"
    rows: tuple[tuple[tuple[RichTextFragment, ...], ...], ...] = ()


class RuleFragment(BaseModel):
    model_config = {"frozen": True}

    frag: Literal["rule"] = "rule"


RichTextFragment = Annotated[
    Union[TextFragment, ImageFragment, ListFragment, TableFragment, RuleFragment],
    Field(discriminator="frag"),
]

ListFragment.model_rebuild()
TableFragment.model_rebuild()


class RichTextBlock(BaseModel):
    """One rendered block: layout flags plus its ordered fragments."""
    model_config = {"frozen": True}

    center: bool = False
    indent: bool = False
    margin: float | None = None
    fragments: tuple[RichTextFragment, ...] = ()

    @property
    def length(self) -> int:
        """Number of addressable positions in the block."""
        return fragments_length(self.fragments)

    @property
    def text(self) -> str:
        """Plain text of the block's top-level text runs."""
        return "".join(f.text for f in self.fragments if isinstance(f, TextFragment))


# =============================================================================
# Addressing
# =============================================================================

def fragment_length(fragment: RichTextFragment) -> int:
    """Number of addressable positions a fragment occupies."""
    if isinstance(fragment, TextFragment):
        return len(fragment.text)
    elif isinstance(fragment, ImageFragment):
        return 1
    elif isinstance(fragment, ListFragment):
        return sum(fragments_length(item) for item in fragment.items)
    elif isinstance(fragment, TableFragment):
        return sum(fragments_length(cell) for row in fragment.rows for cell in row)
    elif isinstance(fragment, RuleFragment):
        return 0
    else:
        assert_never(fragment)


def fragments_length(fragments: Sequence[RichTextFragment]) -> int:
    return sum(fragment_length(f) for f in fragments)


def text_length(fragments: Sequence[RichTextFragment]) -> int:
    """Total length of the top-level text runs."""
    return sum(len(f.text) for f in fragments if isinstance(f, TextFragment))


def iter_text_fragments(fragments: Sequence[RichTextFragment]) -> Iterator[TextFragment]:
    """Iterate text runs depth-first, descending into lists and tables."""
    for fragment in fragments:
        if isinstance(fragment, TextFragment):
            yield fragment
        elif isinstance(fragment, ListFragment):
            for item in fragment.items:
                yield from iter_text_fragments(item)
        elif isinstance(fragment, TableFragment):
            for row in fragment.rows:
                for cell in row:
                    yield from iter_text_fragments(cell)
