"""
BookPath - A node's position in the book tree.

A BookPath is the tuple of child indices leading from the root of the
book content to a node, e.g. (2, 0, 1). Paths are immutable and compare
lexicographically, which is exactly document order: an ancestor sorts
before its descendants, and siblings sort by index.

Paths serialize as hyphen-joined integers ("2-0-1"), the form used in
anchors and reader URLs.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Iterator, SupportsIndex, overload


_COMPONENT_RE = re.compile(r"[0-9]+")


class PathParseError(ValueError):
    """Error while parsing a textual path or address."""
    pass


def parse_component(component: str, source: str) -> int:
    """Parse one base-10 path component, rejecting signs, spaces and underscores."""
    if not _COMPONENT_RE.fullmatch(component):
        raise PathParseError(f"Invalid path component {component!r} in {source!r}")
    return int(component)


@dataclass(frozen=True)
class BookPath:
    """
    Immutable position of a node in the book tree.

    Attributes:
        indices: Tuple of child indices from root to node, e.g., (2, 0, 1)

    Example:
        path = BookPath([2, 0, 1])
        print(path)               # "2-0-1"
        print(len(path))          # 3

        if path1 < path2:         # Document order
            print("path1 comes before path2")

        if path1.is_strict_ancestor_of(path2):
            print("path2 lies inside path1's subtree")
    """

    indices: tuple[int, ...]

    def __init__(self, indices: list[int] | tuple[int, ...] = ()):
        # Use object.__setattr__ because frozen=True
        object.__setattr__(self, 'indices', tuple(indices))

    # -------------------------------------------------------------------------
    # Comparisons (lexicographic - document order)
    # -------------------------------------------------------------------------

    def __lt__(self, other: BookPath) -> bool:
        """Compare paths in document order (depth-first, left-to-right)."""
        if not isinstance(other, BookPath):
            return NotImplemented
        return self.indices < other.indices

    def __le__(self, other: BookPath) -> bool:
        if not isinstance(other, BookPath):
            return NotImplemented
        return self.indices <= other.indices

    def __gt__(self, other: BookPath) -> bool:
        if not isinstance(other, BookPath):
            return NotImplemented
        return self.indices > other.indices

    def __ge__(self, other: BookPath) -> bool:
        if not isinstance(other, BookPath):
            return NotImplemented
        return self.indices >= other.indices

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BookPath):
            return NotImplemented
        return self.indices == other.indices

    def __hash__(self) -> int:
        return hash(self.indices)

    # -------------------------------------------------------------------------
    # Indexing and Slicing
    # -------------------------------------------------------------------------

    @overload
    def __getitem__(self, index: SupportsIndex) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> "BookPath": ...

    def __getitem__(self, index: SupportsIndex | slice) -> "int | BookPath":
        """
        Access indices by index or slice.

        Usage:
            path[0]      # First index
            path[-1]     # Last index
            path[:-1]    # All but last -> new BookPath
        """
        if isinstance(index, slice):
            return BookPath(self.indices[index])
        return self.indices[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.indices)

    def __len__(self) -> int:
        """Number of indices (0 for the root)."""
        return len(self.indices)

    # -------------------------------------------------------------------------
    # Tree relations
    # -------------------------------------------------------------------------

    def is_ancestor_of(self, other: BookPath) -> bool:
        """
        True when this path is a prefix of `other` (a path is its own ancestor).

        A block at (0, 2) contains positions (0, 2, 1), (0, 2, 1, 7), ...
        """
        depth = len(self.indices)
        return depth <= len(other.indices) and other.indices[:depth] == self.indices

    def is_strict_ancestor_of(self, other: BookPath) -> bool:
        """Prefix of `other` and strictly shorter."""
        return len(self.indices) < len(other.indices) and self.is_ancestor_of(other)

    @property
    def is_root(self) -> bool:
        return not self.indices

    def child(self, index: int) -> BookPath:
        """Path of the `index`-th child of this node."""
        return BookPath(self.indices + (index,))

    # -------------------------------------------------------------------------
    # String representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """String representation using indices: '2-0-1'"""
        return "-".join(str(i) for i in self.indices)

    def __repr__(self) -> str:
        return f"BookPath({list(self.indices)})"

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    @classmethod
    def from_string(cls, s: str) -> BookPath:
        """
        Parse path from string.

        Args:
            s: Path string like "2-0-1" ("" is the root)

        Returns:
            BookPath object

        Raises:
            PathParseError: if any component is not a base-10 integer
        """
        if not s:
            return cls([])
        return cls([parse_component(c, s) for c in s.split("-")])

    @classmethod
    def root(cls) -> BookPath:
        """Create an empty root path."""
        return cls([])


def parse_book_path(s: str) -> BookPath | None:
    """Parse a textual path, returning None when it is malformed."""
    try:
        return BookPath.from_string(s)
    except PathParseError:
        return None
