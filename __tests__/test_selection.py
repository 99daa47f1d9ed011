"""Tests for mapping rendered selections back into the book."""
from bookview.book import BookPath, BookSelection
from bookview.reader import PathTranslator, map_selection
from bookview.richtext import BlockAddress, RichTextRange, RichTextSelection, make_range


TRANSLATOR = PathTranslator([BookPath([0]), BookPath([1]), BookPath([1, 0]), BookPath([2])])


def selection(start, end, text="selected"):
    return RichTextSelection(range=RichTextRange(start=start, end=end), text=text)


class TestMapSelection:

    def test_forward(self):
        result = map_selection(selection(BlockAddress(0, 2), BlockAddress(3, 1), "lo w"), TRANSLATOR)
        assert result == BookSelection(start=BookPath([0, 2]), end=BookPath([2, 1]), text="lo w")

    def test_backwards_is_ordered(self):
        result = map_selection(selection(BlockAddress(3, 1), BlockAddress(0, 2)), TRANSLATOR)
        assert result.start == BookPath([0, 2])
        assert result.end == BookPath([2, 1])
        assert result.text == "selected"

    def test_ordered_by_book_path(self):
        # [1, 5] (block 1, offset 5) sorts after [1, 0] (block 2)
        result = map_selection(selection(BlockAddress(1, 5), BlockAddress(2)), TRANSLATOR)
        assert result.start == BookPath([1, 0])
        assert result.end == BookPath([1, 5])

    def test_whole_blocks(self):
        result = map_selection(selection(BlockAddress(1), BlockAddress(1)), TRANSLATOR)
        assert result.start == result.end == BookPath([1])

    def test_no_selection(self):
        assert map_selection(None, TRANSLATOR) is None

    def test_outside_blocks(self):
        assert map_selection(selection(BlockAddress(0), BlockAddress(9)), TRANSLATOR) is None

    def test_from_made_range(self):
        rng = make_range(BlockAddress(3), BlockAddress(0, 1))
        result = map_selection(RichTextSelection(range=rng, text="x"), TRANSLATOR)
        assert result.start == BookPath([0, 1])
        assert result.end == BookPath([2])

    def test_to_colorized(self):
        result = map_selection(selection(BlockAddress(0, 2), BlockAddress(0, 5)), TRANSLATOR)
        colorized = result.to_colorized("yellow")
        assert colorized.start == BookPath([0, 2])
        assert colorized.end == BookPath([0, 5])
        assert colorized.color == "yellow"
