"""
Navigation over the book tree: table of contents and reference targets.

Both walk the tree depth-first in document order, descending into groups,
and report BookPaths a reader can jump to.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from .nodes import BookNode, GroupNode, TitleNode
from .path import BookPath


@dataclass(frozen=True)
class TocItem:
    title: list[str]
    level: int
    path: BookPath

    @property
    def label(self) -> str:
        return self.title[0] if self.title else ""


@dataclass(frozen=True)
class TableOfContents:
    items: list[TocItem] = field(default_factory=list)

    def __iter__(self) -> Iterator[TocItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def iter_nodes(nodes: list[BookNode], path: BookPath | None = None) -> Iterator[tuple[BookNode, BookPath]]:
    """Yield every node with its path, parents before children."""
    path = path or BookPath.root()
    for index, node in enumerate(nodes):
        node_path = path.child(index)
        yield node, node_path
        if isinstance(node, GroupNode):
            yield from iter_nodes(node.nodes, node_path)


def toc_for_nodes(nodes: list[BookNode]) -> TableOfContents:
    """One entry per title node, in document order."""
    items = [
        TocItem(title=list(node.lines), level=node.level, path=path)
        for node, path in iter_nodes(nodes)
        if isinstance(node, TitleNode)
    ]
    return TableOfContents(items=items)


def find_reference(ref_id: str, nodes: list[BookNode]) -> tuple[BookNode, BookPath] | None:
    """First node carrying `ref_id`, with its path."""
    for node, path in iter_nodes(nodes):
        if node.ref_id == ref_id:
            return node, path
    return None
