from __future__ import annotations
import logging

from ..book.ranges import BookSelection
from ..richtext.address import RichTextSelection
from .translate import PathTranslator


logger = logging.getLogger(__name__)


def map_selection(selection: RichTextSelection | None, translator: PathTranslator) -> BookSelection | None:
    """
    Translate a rendered selection into book coordinates.

    The endpoints are ordered by their book paths, so a selection dragged
    backwards still comes out with start <= end. Returns None for "no
    selection" and for endpoints outside the rendered blocks.
    """
    if selection is None:
        return None

    start = translator.to_book_path(selection.start)
    end = translator.to_book_path(selection.end)
    if start is None or end is None:
        logger.debug("Selection %s..%s is outside the rendered blocks", selection.start, selection.end)
        return None

    if end < start:
        start, end = end, start
    return BookSelection(start=start, end=end, text=selection.text)
