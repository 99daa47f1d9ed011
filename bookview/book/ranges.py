"""
Ranges over the book tree, expressed in BookPath coordinates.

ColorizedRange is a highlight request (start inclusive, open-ended when
`end` is None). BookSelection is what a user selection maps to once the
rendered endpoints are translated back into the tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from .path import BookPath


Color = str


def _as_path(value: BookPath | Sequence[int]) -> BookPath:
    return value if isinstance(value, BookPath) else BookPath(tuple(value))


@dataclass(frozen=True)
class ColorizedRange:
    """
    Highlight request over the book tree.

    Attributes:
        start: First position covered (inclusive)
        end: Position where the highlight stops; None means end of document
        color: Background color applied to the covered text

    Example:
        ColorizedRange([1, 3], [1, 7], "yellow")
    """
    start: BookPath
    end: BookPath | None
    color: Color

    def __post_init__(self):
        object.__setattr__(self, 'start', _as_path(self.start))
        if self.end is not None:
            object.__setattr__(self, 'end', _as_path(self.end))

    @property
    def is_open_ended(self) -> bool:
        return self.end is None

    @property
    def is_empty(self) -> bool:
        """True for inverted ranges, which never highlight anything."""
        return self.end is not None and self.end < self.start


@dataclass(frozen=True)
class BookSelection:
    """User selection in book coordinates, ordered so that start <= end."""
    start: BookPath
    end: BookPath
    text: str

    def __post_init__(self):
        object.__setattr__(self, 'start', _as_path(self.start))
        object.__setattr__(self, 'end', _as_path(self.end))

    def to_colorized(self, color: Color) -> ColorizedRange:
        """Turn the selection into a highlight request."""
        return ColorizedRange(self.start, self.end, color)
