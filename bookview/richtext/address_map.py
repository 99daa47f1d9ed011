from __future__ import annotations
from typing import Callable, Generic, Iterator, TypeVar

from .address import BlockAddress


T = TypeVar("T")


class AddressMap(Generic[T]):
    """
    Values registered by block address.

    A presentation layer keeps one entry per rendered element (the block
    itself and the fragments inside it). Lookups of an offset that has no
    entry of its own fall back to the block's entry. Iteration follows
    address order: a block's own entry first, then its offsets ascending.
    """

    __slots__ = ["_blocks"]

    def __init__(self):
        self._blocks: dict[int, tuple[T | None, dict[int, T]]] = {}

    def set(self, address: BlockAddress, value: T) -> None:
        block_value, offsets = self._blocks.get(address.block, (None, {}))
        if address.offset is None:
            block_value = value
        else:
            offsets[address.offset] = value
        self._blocks[address.block] = (block_value, offsets)

    def get(self, address: BlockAddress) -> T | None:
        entry = self._blocks.get(address.block)
        if entry is None:
            return None
        block_value, offsets = entry
        if address.offset is not None and address.offset in offsets:
            return offsets[address.offset]
        return block_value

    def remove(self, address: BlockAddress) -> None:
        entry = self._blocks.get(address.block)
        if entry is None:
            return
        block_value, offsets = entry
        if address.offset is None:
            block_value = None
        else:
            offsets.pop(address.offset, None)
        if block_value is None and not offsets:
            del self._blocks[address.block]
        else:
            self._blocks[address.block] = (block_value, offsets)

    def __iter__(self) -> Iterator[tuple[BlockAddress, T]]:
        for block in sorted(self._blocks):
            block_value, offsets = self._blocks[block]
            if block_value is not None:
                yield BlockAddress(block), block_value
            for offset in sorted(offsets):
                yield BlockAddress(block, offset), offsets[offset]

    def __len__(self) -> int:
        return sum(
            (block_value is not None) + len(offsets)
            for block_value, offsets in self._blocks.values()
        )

    def last_matching(self, predicate: Callable[[T], bool]) -> BlockAddress | None:
        """
        Last address, in address order, whose value satisfies the predicate.

        With a visibility predicate this is the current reading position:
        the deepest element still crossing the top of the viewport.
        """
        last = None
        for address, value in self:
            if predicate(value):
                last = address
        return last
