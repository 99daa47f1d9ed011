"""Tests for the book content schema and rich text models."""
import pytest
from pydantic import ValidationError
from bookview.book import AttrSpan, BookDocument, CompoundSpan, GroupNode, ParagraphNode, RefSpan, Semantic, has_semantic
from bookview.richtext import (
    ImageFragment,
    ListFragment,
    RichTextAttrs,
    RichTextBlock,
    RuleFragment,
    TableFragment,
    TextFragment,
    fragment_length,
    iter_text_fragments,
)
from bookview.utils import UnknownVariantError


class TestBookSchema:

    def test_span_variants_from_dicts(self):
        node = ParagraphNode.model_validate({
            "node": "pph",
            "span": {"span": "compound", "spans": [
                "see ",
                {"span": "ref", "content": "note", "ref_to_id": "n1"},
                {"span": "attrs", "content": "!", "attrs": ["bold"]},
            ]},
        })
        assert isinstance(node.span, CompoundSpan)
        assert isinstance(node.span.spans[1], RefSpan)
        assert isinstance(node.span.spans[2], AttrSpan)

    def test_unknown_node_rejected(self):
        with pytest.raises(ValidationError):
            BookDocument.model_validate({"nodes": [{"node": "video", "src": "x"}]})

    def test_unknown_attribute_rejected(self):
        with pytest.raises(ValidationError):
            AttrSpan(content="x", attrs=["blink"])

    def test_has_semantic(self):
        group = GroupNode(semantics=[Semantic(semantic="footnote", title=["1"])])
        assert has_semantic(group, "footnote").title == ["1"]
        assert has_semantic(group, "epigraph") is None


class TestRichTextAttrs:

    def test_merge_is_right_biased(self):
        merged = RichTextAttrs(color="red", bold=True).merge(RichTextAttrs(color="blue", italic=True))
        assert merged == RichTextAttrs(color="blue", bold=True, italic=True)

    def test_merge_empty_returns_same(self):
        attrs = RichTextAttrs(bold=True)
        assert attrs.merge(RichTextAttrs()) is attrs

    def test_frozen(self):
        with pytest.raises(ValidationError):
            RichTextAttrs().bold = True


class TestFragmentLength:

    def test_lengths(self):
        assert fragment_length(TextFragment(text="hello")) == 5
        assert fragment_length(ImageFragment(src="a.png")) == 1
        assert fragment_length(RuleFragment()) == 0
        assert fragment_length(ListFragment(items=[[TextFragment(text="ab")], [ImageFragment(src="b")]])) == 3
        assert fragment_length(TableFragment(rows=[[[TextFragment(text="abc")], []]])) == 3

    def test_unknown_fragment(self):
        with pytest.raises(UnknownVariantError):
            fragment_length("text")

    def test_block_text_and_length(self):
        block = RichTextBlock(fragments=[TextFragment(text="ab"), ImageFragment(src="x"), TextFragment(text="c")])
        assert block.text == "abc"
        assert block.length == 4

    def test_iter_text_fragments(self):
        fragments = [
            TextFragment(text="a"),
            ListFragment(items=[[TextFragment(text="b")]]),
            TableFragment(rows=[[[TextFragment(text="c")]]]),
        ]
        assert [f.text for f in iter_text_fragments(fragments)] == ["a", "b", "c"]

    def test_serialized_shape(self):
        block = RichTextBlock(indent=True, fragments=[TextFragment(text="a", attrs=RichTextAttrs(bold=True))])
        dumped = block.model_dump(mode="json", exclude_none=True)
        assert dumped["fragments"] == [{"frag": "text", "text": "a", "attrs": {"bold": True}}]
        assert RichTextBlock.model_validate(dumped) == block
