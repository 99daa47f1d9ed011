"""
Book content and book-level coordinates.

This module provides:
- BookPath: Position of a node in the book tree (document order)
- BookDocument: Content nodes with their image dictionary
- ParagraphNode, TitleNode, GroupNode, ...: The closed node set
- CompoundSpan, AttrSpan, RefSpan, ...: The closed span set
- ColorizedRange, BookSelection: Ranges in BookPath coordinates
- toc_for_nodes, find_reference: Navigation over the tree
"""

from .path import BookPath, PathParseError, parse_book_path
from .nodes import (
    AttrSpan,
    BookDocument,
    BookNode,
    CompoundSpan,
    GroupNode,
    IgnoreNode,
    ImageData,
    ImageNode,
    ImageRef,
    ImageSpan,
    ListItem,
    ListNode,
    ParagraphNode,
    RefSpan,
    Semantic,
    SemanticSpan,
    SeparatorNode,
    Span,
    TableNode,
    TableRow,
    TitleNode,
    has_semantic,
)
from .ranges import BookSelection, Color, ColorizedRange
from .navigation import TableOfContents, TocItem, find_reference, iter_nodes, toc_for_nodes

__all__ = [
    "BookPath",
    "PathParseError",
    "parse_book_path",
    "BookDocument",
    "BookNode",
    "ParagraphNode",
    "TitleNode",
    "GroupNode",
    "ListNode",
    "ListItem",
    "TableNode",
    "TableRow",
    "SeparatorNode",
    "ImageNode",
    "IgnoreNode",
    "Span",
    "CompoundSpan",
    "AttrSpan",
    "RefSpan",
    "ImageSpan",
    "SemanticSpan",
    "Semantic",
    "ImageRef",
    "ImageData",
    "has_semantic",
    "Color",
    "ColorizedRange",
    "BookSelection",
    "TableOfContents",
    "TocItem",
    "iter_nodes",
    "toc_for_nodes",
    "find_reference",
]
