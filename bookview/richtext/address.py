"""
Block addresses - positions in the flattened block stream.

A BlockAddress is a block index plus an optional offset inside that block.
It is what a presentation layer reports back (topmost visible position,
selection endpoints) and what it is asked to scroll to.

Textual forms:
    "4"       -> BlockAddress(4)
    "4-12"    -> BlockAddress(4, 12)
    "@id:4-12" is the element id a presentation layer puts on rendered spans
"""

from __future__ import annotations
from dataclasses import dataclass

from ..book.path import PathParseError, parse_component


ELEMENT_ID_PREFIX = "@id"


@dataclass(frozen=True)
class BlockAddress:
    """
    Position in the rendered block stream.

    Attributes:
        block: Index of the block
        offset: Offset inside the block; None addresses the whole block
    """
    block: int
    offset: int | None = None

    def __post_init__(self):
        if self.block < 0:
            raise ValueError(f"block must be non-negative, got {self.block}")
        if self.offset is not None and self.offset < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset}")

    def _key(self) -> tuple[int, int]:
        # The whole block sorts before any offset inside it
        return (self.block, -1 if self.offset is None else self.offset)

    def __lt__(self, other: BlockAddress) -> bool:
        if not isinstance(other, BlockAddress):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: BlockAddress) -> bool:
        if not isinstance(other, BlockAddress):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: BlockAddress) -> bool:
        if not isinstance(other, BlockAddress):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: BlockAddress) -> bool:
        if not isinstance(other, BlockAddress):
            return NotImplemented
        return self._key() >= other._key()

    @property
    def block_only(self) -> BlockAddress:
        """The address of the whole containing block."""
        return self if self.offset is None else BlockAddress(self.block)

    def with_offset(self, offset: int | None) -> BlockAddress:
        return BlockAddress(self.block, offset)

    def __str__(self) -> str:
        """String representation: '4' or '4-12'"""
        if self.offset is None:
            return f"{self.block}"
        return f"{self.block}-{self.offset}"

    @classmethod
    def from_string(cls, s: str) -> BlockAddress:
        """
        Parse an address from "<block>" or "<block>-<offset>".

        Raises:
            PathParseError: for anything else
        """
        components = s.split("-")
        if len(components) > 2:
            raise PathParseError(f"Too many components in address {s!r}")
        block = parse_component(components[0], s)
        offset = parse_component(components[1], s) if len(components) == 2 else None
        return cls(block, offset)


def parse_block_address(s: str) -> BlockAddress | None:
    """Parse a textual address, returning None when it is malformed."""
    try:
        return BlockAddress.from_string(s)
    except PathParseError:
        return None


# =============================================================================
# Element ids
# =============================================================================

def address_to_element_id(address: BlockAddress) -> str:
    return f"{ELEMENT_ID_PREFIX}:{address}"


def element_id_to_address(element_id: str) -> BlockAddress | None:
    """Recover the address from an element id; None for ids we did not produce."""
    components = element_id.split(":")
    if len(components) != 2 or components[0] != ELEMENT_ID_PREFIX:
        return None
    return parse_block_address(components[1])


# =============================================================================
# Ranges and selections
# =============================================================================

@dataclass(frozen=True)
class RichTextRange:
    start: BlockAddress
    end: BlockAddress


@dataclass(frozen=True)
class RichTextSelection:
    """Selection as reported by a presentation layer, in block coordinates."""
    range: RichTextRange
    text: str

    @property
    def start(self) -> BlockAddress:
        return self.range.start

    @property
    def end(self) -> BlockAddress:
        return self.range.end


def make_range(left: BlockAddress, right: BlockAddress) -> RichTextRange:
    """Build a range from two endpoints given in either order."""
    if right < left:
        return RichTextRange(start=right, end=left)
    return RichTextRange(start=left, end=right)
