"""
ReaderSession - what a presentation layer holds while showing a book.

A session owns one block build of the book content and answers the
callbacks a renderer fires:

    session = ReaderSession(document.nodes, images=document.images)
    render(session.blocks)

    session.on_scroll(BlockAddress(12, 40))          # -> BookPath to store
    session.on_selection_change(selection)           # -> BookSelection | None
    session.request_scroll(BookPath([3, 0, 2]))      # -> BlockAddress to scroll to
    session.on_ref_click("note-7")                   # -> BookPath of the target

Changing the highlights produces a new session with a fresh build; the old
session is left untouched.
"""

from __future__ import annotations
import logging
from typing import Iterable, Mapping

from ..book.navigation import TableOfContents, find_reference, toc_for_nodes
from ..book.nodes import BookDocument, BookNode, ImageData
from ..book.path import BookPath
from ..book.ranges import BookSelection, ColorizedRange
from ..config import RenderSettings
from ..richtext.address import BlockAddress, RichTextSelection
from ..richtext.model import RichTextBlock
from .blocks import BlocksData, build_blocks_data
from .env import BuildBlocksEnv
from .selection import map_selection


logger = logging.getLogger(__name__)


class ReaderSession:

    def __init__(
        self,
        nodes: list[BookNode],
        settings: RenderSettings | None = None,
        images: Mapping[str, ImageData] | None = None,
        colorization: Iterable[ColorizedRange] | None = None,
    ):
        self._nodes = list(nodes)
        self._env = BuildBlocksEnv.create(settings=settings, images=images, colorization=colorization)
        self._data = build_blocks_data(self._nodes, self._env)
        self._scroll_target: BlockAddress | None = None

    @classmethod
    def from_document(
        cls,
        document: BookDocument,
        settings: RenderSettings | None = None,
        colorization: Iterable[ColorizedRange] | None = None,
    ) -> ReaderSession:
        return cls(document.nodes, settings=settings, images=document.images, colorization=colorization)

    # -------------------------------------------------------------------------
    # Build output
    # -------------------------------------------------------------------------

    @property
    def data(self) -> BlocksData:
        return self._data

    @property
    def blocks(self) -> tuple[RichTextBlock, ...]:
        return self._data.blocks

    @property
    def paths(self) -> tuple[BookPath, ...]:
        return self._data.paths

    @property
    def settings(self) -> RenderSettings:
        return self._env.settings

    @property
    def colorization(self) -> tuple[ColorizedRange, ...]:
        return self._env.colorization

    def with_colorization(self, colorization: Iterable[ColorizedRange]) -> ReaderSession:
        """New session over the same content with a different highlight set."""
        return ReaderSession(
            self._nodes,
            settings=self._env.settings,
            images=self._env.images,
            colorization=colorization,
        )

    # -------------------------------------------------------------------------
    # Renderer callbacks
    # -------------------------------------------------------------------------

    def on_scroll(self, address: BlockAddress) -> BookPath | None:
        """Book path of the topmost visible position reported by the renderer."""
        path = self._data.translator.to_book_path(address)
        if path is None:
            logger.warning("Scroll position %s is outside the rendered blocks", address)
        return path

    def on_selection_change(self, selection: RichTextSelection | None) -> BookSelection | None:
        return map_selection(selection, self._data.translator)

    def request_scroll(self, path: BookPath) -> BlockAddress | None:
        """
        Resolve a navigation request to the address the renderer should show.

        Requests are not queued: the latest one replaces `scroll_target`.
        A path with no block leaves nothing to scroll to.
        """
        address = self._data.translator.to_block_address(path)
        if address is None:
            logger.warning("No block for path %s, ignoring scroll request", path)
        self._scroll_target = address
        return address

    @property
    def scroll_target(self) -> BlockAddress | None:
        return self._scroll_target

    def on_ref_click(self, ref_id: str) -> BookPath | None:
        """Path of the node a reference points to, for the navigation layer."""
        found = find_reference(ref_id, self._nodes)
        if found is None:
            logger.warning("Reference target %r not found", ref_id)
            return None
        _, path = found
        return path

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def table_of_contents(self) -> TableOfContents:
        return toc_for_nodes(self._nodes)

    def __repr__(self) -> str:
        return f"ReaderSession({len(self._data)} blocks, {len(self._env.colorization)} highlights)"
