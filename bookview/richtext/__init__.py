"""
Rich text - the flat rendered form of a book and its coordinates.

This module provides:
- RichTextBlock: One rendered block with its fragments
- TextFragment, ImageFragment, ListFragment, TableFragment, RuleFragment
- RichTextAttrs: Sparse style attributes with right-biased merge
- AttrsRange, apply_attrs_range: Overlay attributes on a character window
- BlockAddress: Block index plus optional offset, with its textual forms
- AddressMap: Values registered by block address
"""

from .model import (
    ImageFragment,
    ListFragment,
    RichTextAttrs,
    RichTextBlock,
    RichTextFragment,
    RuleFragment,
    TableFragment,
    TextFragment,
    fragment_length,
    fragments_length,
    iter_text_fragments,
    text_length,
)
from .attrs_range import AttrsRange, apply_attrs_range, split_text_fragment
from .address import (
    BlockAddress,
    RichTextRange,
    RichTextSelection,
    address_to_element_id,
    element_id_to_address,
    make_range,
    parse_block_address,
)
from .address_map import AddressMap

__all__ = [
    "RichTextBlock",
    "RichTextFragment",
    "RichTextAttrs",
    "TextFragment",
    "ImageFragment",
    "ListFragment",
    "TableFragment",
    "RuleFragment",
    "fragment_length",
    "fragments_length",
    "text_length",
    "iter_text_fragments",
    "AttrsRange",
    "apply_attrs_range",
    "split_text_fragment",
    "BlockAddress",
    "RichTextRange",
    "RichTextSelection",
    "make_range",
    "parse_block_address",
    "address_to_element_id",
    "element_id_to_address",
    "AddressMap",
]
