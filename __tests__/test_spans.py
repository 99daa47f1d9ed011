"""Tests for compiling span markup into fragments."""
import pytest
from bookview.book import AttrSpan, CompoundSpan, ImageData, ImageRef, ImageSpan, RefSpan, Semantic, SemanticSpan
from bookview.config import RenderSettings
from bookview.reader import BuildBlocksEnv, convert_attrs, fragments_for_span
from bookview.richtext import ImageFragment, RichTextAttrs, TextFragment
from bookview.utils import UnknownVariantError


@pytest.fixture
def env():
    return BuildBlocksEnv.create(
        settings=RenderSettings(ref_color="teal", ref_hover_color="navy"),
        images={"fig-1": ImageData(src="images/fig-1.png", title="Figure 1")},
    )


class TestSimpleSpans:

    def test_string(self, env):
        assert fragments_for_span("Hello", env) == [TextFragment(text="Hello")]

    def test_compound_preserves_order(self, env):
        span = CompoundSpan(spans=["Call me ", "Ishmael", "."])
        result = fragments_for_span(span, env)
        assert [f.text for f in result] == ["Call me ", "Ishmael", "."]

    def test_semantic_passes_through(self, env):
        span = SemanticSpan(content="note", semantics=[Semantic(semantic="footnote")])
        assert fragments_for_span(span, env) == [TextFragment(text="note")]


class TestAttributedSpans:

    def test_italic(self, env):
        span = CompoundSpan(spans=["Call me ", AttrSpan(content="Ishmael", attrs=["italic"]), "."])
        result = fragments_for_span(span, env)

        assert [f.text for f in result] == ["Call me ", "Ishmael", "."]
        assert result[0].attrs.is_empty
        assert result[1].attrs == RichTextAttrs(italic=True)
        assert result[2].attrs.is_empty

    def test_nested_attributes_compose(self, env):
        span = AttrSpan(
            content=CompoundSpan(spans=["a", AttrSpan(content="b", attrs=["bold"])]),
            attrs=["italic"],
        )
        result = fragments_for_span(span, env)

        assert result[0].attrs == RichTextAttrs(italic=True)
        assert result[1].attrs == RichTextAttrs(italic=True, bold=True)

    def test_attribute_without_visual_counterpart(self, env):
        result = fragments_for_span(AttrSpan(content="verse", attrs=["poem"]), env)
        assert result == [TextFragment(text="verse")]

    def test_convert_attrs(self):
        assert convert_attrs(["bold", "line"]) == RichTextAttrs(bold=True, line=True)
        assert convert_attrs([]).is_empty


class TestRefSpans:

    def test_reference_colors(self, env):
        span = RefSpan(content=CompoundSpan(spans=["see ", "note"]), ref_to_id="note-1")
        result = fragments_for_span(span, env)

        assert [f.text for f in result] == ["see ", "note"]
        for fragment in result:
            assert fragment.attrs.ref == "note-1"
            assert fragment.attrs.color == "teal"
            assert fragment.attrs.hover_color == "navy"


class TestImageSpans:

    def test_resolved(self, env):
        result = fragments_for_span(ImageSpan(image=ImageRef(image_id="fig-1")), env)
        assert result == [ImageFragment(src="images/fig-1.png", title="Figure 1")]

    def test_unresolved_degrades_to_nothing(self, env):
        span = CompoundSpan(spans=["before", ImageSpan(image=ImageRef(image_id="missing")), "after"])
        result = fragments_for_span(span, env)
        assert [f.text for f in result] == ["before", "after"]


class TestUnknownSpans:

    def test_unknown_variant_fails_fast(self, env):
        with pytest.raises(UnknownVariantError):
            fragments_for_span(42, env)

    def test_unknown_nested_variant_fails_fast(self, env):
        span = CompoundSpan.model_construct(spans=["ok", object()])
        with pytest.raises(UnknownVariantError):
            fragments_for_span(span, env)
