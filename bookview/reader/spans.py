"""
Span compilation - inline markup to styled fragments.

Nested markup becomes a flat list of text runs: inner spans are compiled
first, then the wrapper's attributes are overlaid on the whole result, so
attributes compose from the inside out (outer wrappers win on conflicts).
"""

from __future__ import annotations
import logging

from ..book.nodes import AttrSpan, AttributeName, CompoundSpan, ImageSpan, RefSpan, SemanticSpan, Span
from ..richtext.attrs_range import AttrsRange, apply_attrs_range
from ..richtext.model import ImageFragment, RichTextAttrs, RichTextFragment, TextFragment
from ..utils.type_utils import assert_never
from .env import BuildBlocksEnv


logger = logging.getLogger(__name__)


ATTRIBUTE_STYLES: dict[AttributeName, RichTextAttrs] = {
    "italic": RichTextAttrs(italic=True),
    "bold": RichTextAttrs(bold=True),
    "line": RichTextAttrs(line=True),
    # No visual counterpart yet
    "small": RichTextAttrs(),
    "big": RichTextAttrs(),
    "quote": RichTextAttrs(),
    "poem": RichTextAttrs(),
}


def convert_attrs(names: list[AttributeName]) -> RichTextAttrs:
    attrs = RichTextAttrs()
    for name in names:
        attrs = attrs.merge(ATTRIBUTE_STYLES[name])
    return attrs


def fragments_for_span(span: Span, env: BuildBlocksEnv) -> list[RichTextFragment]:
    """Compile a span into an ordered list of fragments."""
    if isinstance(span, str):
        return [TextFragment(text=span)]
    elif isinstance(span, CompoundSpan):
        result: list[RichTextFragment] = []
        for inner in span.spans:
            result.extend(fragments_for_span(inner, env))
        return result
    elif isinstance(span, AttrSpan):
        inside = fragments_for_span(span.content, env)
        return apply_attrs_range(inside, AttrsRange(start=0, attrs=convert_attrs(span.attrs)))
    elif isinstance(span, RefSpan):
        inside = fragments_for_span(span.content, env)
        attrs = RichTextAttrs(
            ref=span.ref_to_id,
            color=env.ref_color,
            hover_color=env.ref_hover_color,
        )
        return apply_attrs_range(inside, AttrsRange(start=0, attrs=attrs))
    elif isinstance(span, ImageSpan):
        image = env.images.get(span.image.image_id)
        if image is None:
            logger.debug("Unresolved image %r at %s, skipping", span.image.image_id, env.path)
            return []
        return [ImageFragment(src=image.src, title=image.title)]
    elif isinstance(span, SemanticSpan):
        return fragments_for_span(span.content, env)
    else:
        assert_never(span)
