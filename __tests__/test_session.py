"""Tests for the reader session a presentation layer talks to."""
import logging

import pytest
from bookview.book import (
    BookDocument,
    BookPath,
    ColorizedRange,
    CompoundSpan,
    GroupNode,
    ImageData,
    ImageRef,
    ImageSpan,
    ParagraphNode,
    RefSpan,
    Semantic,
    TitleNode,
)
from bookview.config import RenderSettings
from bookview.reader import ReaderSession
from bookview.richtext import BlockAddress, ImageFragment, RichTextRange, RichTextSelection


NODES = [
    TitleNode(lines=["Ch.1"], level=1),
    ParagraphNode(span=CompoundSpan(spans=["Hello ", RefSpan(content="world", ref_to_id="fn-1")])),
    ParagraphNode(span=ImageSpan(image=ImageRef(image_id="fig"))),
    GroupNode(
        nodes=[ParagraphNode(span="The world is round.")],
        semantics=[Semantic(semantic="footnote", title=["1"])],
        ref_id="fn-1",
    ),
]


@pytest.fixture
def session():
    return ReaderSession(NODES, images={"fig": ImageData(src="fig.png")})


class TestBuild:

    def test_blocks_and_paths(self, session):
        assert len(session.blocks) == 5
        assert session.paths == (BookPath([0]), BookPath([1]), BookPath([2]), BookPath([3]), BookPath([3, 0]))
        assert session.blocks[2].fragments == (ImageFragment(src="fig.png"),)

    def test_from_document(self):
        document = BookDocument(nodes=NODES, images={"fig": ImageData(src="fig.png")})
        session = ReaderSession.from_document(document, settings=RenderSettings(ref_color="green"))

        assert session.paths == ReaderSession(NODES).paths
        assert session.blocks[1].fragments[-1].attrs.color == "green"


class TestCallbacks:

    def test_on_scroll(self, session):
        assert session.on_scroll(BlockAddress(4, 3)) == BookPath([3, 0, 3])
        assert session.on_scroll(BlockAddress(1)) == BookPath([1])

    def test_on_scroll_outside(self, session, caplog):
        with caplog.at_level(logging.WARNING, logger="bookview.reader.session"):
            assert session.on_scroll(BlockAddress(42)) is None
        assert "outside the rendered blocks" in caplog.text

    def test_on_selection_change(self, session):
        rng = RichTextRange(start=BlockAddress(4, 4), end=BlockAddress(1, 2))
        result = session.on_selection_change(RichTextSelection(range=rng, text="llo world"))

        assert result.start == BookPath([1, 2])
        assert result.end == BookPath([3, 0, 4])
        assert result.text == "llo world"
        assert session.on_selection_change(None) is None

    def test_request_scroll_last_write_wins(self, session):
        assert session.scroll_target is None
        assert session.request_scroll(BookPath([1, 6])) == BlockAddress(1, 6)
        assert session.request_scroll(BookPath([3, 0])) == BlockAddress(4)
        assert session.scroll_target == BlockAddress(4)

    def test_request_scroll_miss_is_noop(self, session, caplog):
        with caplog.at_level(logging.WARNING, logger="bookview.reader.session"):
            assert session.request_scroll(BookPath([9, 9, 9])) is None
        assert session.scroll_target is None
        assert "ignoring scroll request" in caplog.text

    def test_on_ref_click(self, session):
        path = session.on_ref_click("fn-1")
        assert path == BookPath([3])
        assert session.request_scroll(path) == BlockAddress(3)

    def test_on_ref_click_unknown(self, session):
        assert session.on_ref_click("missing") is None


class TestColorization:

    def test_with_colorization_builds_new_session(self, session):
        highlighted = session.with_colorization([ColorizedRange([1, 0], [1, 3], "yellow")])

        assert highlighted is not session
        assert highlighted.colorization == (ColorizedRange([1, 0], [1, 3], "yellow"),)
        assert session.colorization == ()
        assert highlighted.blocks[1].fragments[1].attrs.background == "yellow"
        assert all(
            getattr(f, "attrs", None) is None or f.attrs.background is None
            for b in session.blocks
            for f in b.fragments
        )

    def test_keeps_images_and_settings(self):
        settings = RenderSettings(font_size=18)
        session = ReaderSession(NODES, settings=settings, images={"fig": ImageData(src="fig.png")})
        highlighted = session.with_colorization([])

        assert highlighted.settings == settings
        assert highlighted.blocks[2].fragments == (ImageFragment(src="fig.png"),)

    def test_table_of_contents(self, session):
        toc = session.table_of_contents()
        assert [item.label for item in toc] == ["Ch.1"]
