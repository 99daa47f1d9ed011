"""
Path translation between block addresses and book paths.

The translator is built from the ordered path table of one block build:
block i was produced by the node at paths[i].

    to_book_path(BlockAddress(1, 4))   -> paths[1] + [4]
    to_block_address(paths[1])         -> BlockAddress(1)
    to_block_address(paths[1] + [4])   -> BlockAddress(1, 4)

The last rule treats the trailing component of a path as an offset inside
the block. For paragraphs that is exact, since paths below a paragraph come
from offsets in the first place; for a path below a group it is the child
index that happens to have no block of its own, so the result is only an
approximation.
"""

from __future__ import annotations
import logging
from typing import Sequence

from ..book.path import BookPath
from ..richtext.address import BlockAddress


logger = logging.getLogger(__name__)


class PathTranslator:

    __slots__ = ["_paths", "_index"]

    def __init__(self, paths: Sequence[BookPath]):
        self._paths: tuple[BookPath, ...] = tuple(paths)
        self._index: dict[BookPath, int] = {}
        for i, path in enumerate(self._paths):
            # Paths are unique; keep the first block if a caller passes duplicates
            self._index.setdefault(path, i)

    @property
    def paths(self) -> tuple[BookPath, ...]:
        return self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def to_book_path(self, address: BlockAddress) -> BookPath | None:
        """Book path of a block address; None when the block does not exist."""
        if address.block >= len(self._paths):
            logger.debug("Block %d out of range (%d blocks)", address.block, len(self._paths))
            return None
        prefix = self._paths[address.block]
        if address.offset is None:
            return prefix
        return prefix.child(address.offset)

    def to_block_address(self, path: BookPath) -> BlockAddress | None:
        """Block address of a book path; None when no block matches."""
        # TODO: resolve paths below a block to real character offsets once
        # blocks keep a map from child index to offset.
        if path.is_root:
            return BlockAddress(0) if self._paths else None

        block = self._index.get(path)
        if block is not None:
            return BlockAddress(block)

        block = self._index.get(path[:-1])
        if block is not None:
            return BlockAddress(block, path[-1])

        return None
