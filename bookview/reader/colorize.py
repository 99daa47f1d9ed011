"""
Colorization - project book-level highlight ranges onto block-local windows.

A highlight is expressed in BookPath coordinates while fragments are
addressed by offset inside their block. For a block at `path`:

- the block lies after the range when the range end sorts before it;
- a block at or after the range start is covered from offset 0;
- a block that is an ancestor of the range start is covered from the start's
  component one level below the block;
- anything else lies before the range.

The end works the same way: if the block is an ancestor of the range end the
window stops at the end's component below the block, otherwise it runs to
the end of the block.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

from ..book.path import BookPath
from ..book.ranges import ColorizedRange
from ..richtext.attrs_range import AttrsRange, apply_attrs_range
from ..richtext.model import RichTextAttrs, RichTextFragment


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalRange:
    """Window of a highlight inside one block; end None runs to the block end."""
    start: int
    end: int | None = None


def project_range(path: BookPath, colorized: ColorizedRange) -> LocalRange | None:
    """Resolve a highlight against the block at `path`; None when they do not overlap."""
    if colorized.is_empty:
        return None
    start_path, end_path = colorized.start, colorized.end

    if end_path is not None and end_path < path:
        return None

    if not path < start_path:
        start = 0
    elif path.is_strict_ancestor_of(start_path):
        start = start_path[len(path)]
    else:
        return None

    end = None
    if end_path is not None and path.is_strict_ancestor_of(end_path):
        end = end_path[len(path)]
        if end <= start:
            return None

    return LocalRange(start=start, end=end)


def colorization_relative_to_path(path: BookPath, colorized: ColorizedRange) -> AttrsRange | None:
    local = project_range(path, colorized)
    if local is None:
        return None
    return AttrsRange(
        start=local.start,
        end=local.end,
        attrs=RichTextAttrs(background=colorized.color),
    )


def colorize_fragments(
    fragments: list[RichTextFragment],
    colorization: Iterable[ColorizedRange],
    path: BookPath,
) -> list[RichTextFragment]:
    """Paint every highlight that overlaps the block at `path`, in order."""
    for colorized in colorization:
        relative = colorization_relative_to_path(path, colorized)
        if relative is not None:
            logger.debug("Colorizing %s with %s over [%s, %s)", path, colorized.color, relative.start, relative.end)
            fragments = apply_attrs_range(fragments, relative)
    return fragments
