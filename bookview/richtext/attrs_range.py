"""
Attribute ranges - overlay styles onto a character window of a fragment list.

    fragments = [TextFragment(text="Hello "), TextFragment(text="world", attrs=bold)]
    apply_attrs_range(fragments, AttrsRange(start=3, end=8, attrs=yellow))
    # ["Hel", "lo "+yellow, "wo"+bold+yellow, "rld"+bold]

Only text runs are split. Images, lists, tables and rules still advance the
running offset by their addressing length but are never restyled.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .model import RichTextAttrs, RichTextFragment, TextFragment, fragment_length


@dataclass(frozen=True)
class AttrsRange:
    """
    Attributes to apply over the block-local window [start, end).

    Attributes:
        start: First offset covered (inclusive)
        end: Offset where the window stops (exclusive); None means to the end
        attrs: Attributes merged into every covered text run
    """
    start: int
    end: int | None = None
    attrs: RichTextAttrs = field(default_factory=RichTextAttrs)

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"start must be non-negative, got {self.start}")

    @property
    def is_empty(self) -> bool:
        return self.end is not None and self.end <= self.start

    def overlaps(self, start: int, end: int) -> bool:
        """Check if the window overlaps [start, end)."""
        return start < end and self.start < end and (self.end is None or start < self.end)


def split_text_fragment(fragment: TextFragment, position: int) -> tuple[TextFragment, TextFragment]:
    """
    Split a text run at the given position (relative to the run start).

    Returns (left, right) with left = text[:position] and right = text[position:];
    both keep the run's attributes.
    """
    return fragment.with_text(fragment.text[:position]), fragment.with_text(fragment.text[position:])


def apply_attrs_range(fragments: list[RichTextFragment], attrs_range: AttrsRange) -> list[RichTextFragment]:
    """
    Merge `attrs_range.attrs` into the text covered by the window.

    Text runs straddling a window boundary are split so that only the covered
    part is restyled. The result has at least as many fragments as the input,
    keeps their order and never changes the total text length.
    """
    if attrs_range.is_empty:
        return list(fragments)

    result: list[RichTextFragment] = []
    pos = 0
    for fragment in fragments:
        frag_start = pos
        frag_end = pos + fragment_length(fragment)
        pos = frag_end

        if not isinstance(fragment, TextFragment) or not attrs_range.overlaps(frag_start, frag_end):
            result.append(fragment)
            continue

        rest = fragment
        if frag_start < attrs_range.start:
            # Straddles the start: keep the leading piece untouched
            pre, rest = split_text_fragment(rest, attrs_range.start - frag_start)
            result.append(pre)
            frag_start = attrs_range.start

        if attrs_range.end is not None and frag_end > attrs_range.end:
            # Straddles the end: only the inner piece gets the attributes
            inside, post = split_text_fragment(rest, attrs_range.end - frag_start)
            result.append(inside.with_attrs(attrs_range.attrs))
            result.append(post)
        else:
            result.append(rest.with_attrs(attrs_range.attrs))

    return result
