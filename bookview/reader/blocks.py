"""
Block building - flatten the book tree into an ordered list of blocks.

Every emitted block is paired with the BookPath of the node it came from.
Blocks are produced by a single depth-first walk, so the list of paths is
strictly increasing in document order:

    [TitleNode(lines=["Ch.1"], level=1), ParagraphNode(span="Hello world")]
    -> [(title block, [0]), (paragraph block, [1])]

Footnote groups emit their own title block at the group's path, followed
by the blocks of their children one level deeper.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..book.nodes import (
    BookNode,
    GroupNode,
    IgnoreNode,
    ImageNode,
    ListNode,
    ParagraphNode,
    SeparatorNode,
    TableNode,
    TitleNode,
    has_semantic,
)
from ..book.path import BookPath
from ..richtext.attrs_range import AttrsRange, apply_attrs_range
from ..richtext.model import (
    ListFragment,
    RichTextAttrs,
    RichTextBlock,
    RichTextFragment,
    RuleFragment,
    TableFragment,
    TextFragment,
)
from ..utils.type_utils import assert_never
from .colorize import colorize_fragments
from .env import BuildBlocksEnv
from .spans import fragments_for_span
from .translate import PathTranslator


logger = logging.getLogger(__name__)


TOP_TITLE_LETTER_SPACING = 0.15
HEADING_FONT_SCALE = 1.5
HEADING_MARGIN = 1.0
TITLE_MARGIN = 0.8
FOOTNOTE_TITLE_LEVEL = -1


@dataclass(frozen=True)
class BlockWithPath:
    block: RichTextBlock
    path: BookPath


class BlocksData:
    """
    Result of one build: the blocks, their paths and the translator between
    block addresses and book paths.

    Built from scratch for every document or colorization change and never
    modified afterwards.
    """

    __slots__ = ["_entries", "_translator"]

    def __init__(self, entries: Iterable[BlockWithPath]):
        self._entries: tuple[BlockWithPath, ...] = tuple(entries)
        self._translator = PathTranslator([e.path for e in self._entries])

    @property
    def blocks(self) -> tuple[RichTextBlock, ...]:
        return tuple(e.block for e in self._entries)

    @property
    def paths(self) -> tuple[BookPath, ...]:
        return tuple(e.path for e in self._entries)

    @property
    def translator(self) -> PathTranslator:
        return self._translator

    def __iter__(self) -> Iterator[BlockWithPath]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> BlockWithPath:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"BlocksData({len(self._entries)} blocks)"


def build_blocks_data(nodes: list[BookNode], env: BuildBlocksEnv | None = None) -> BlocksData:
    """Flatten `nodes` into blocks tagged with their paths."""
    env = env or BuildBlocksEnv()
    data = BlocksData(blocks_for_nodes(nodes, env))
    logger.debug("Built %d blocks from %d nodes", len(data), len(nodes))
    return data


def blocks_for_nodes(nodes: list[BookNode], env: BuildBlocksEnv) -> Iterator[BlockWithPath]:
    """
    Walk sibling nodes in order.

    Tracks whether the nearest preceding sibling that produced a block was a
    title: the paragraph right after a title opens with drop caps.
    """
    after_title = False
    for index, node in enumerate(nodes):
        child_env = env.child(index)
        emitted = False
        for item in blocks_for_node(node, child_env, after_title=after_title):
            emitted = True
            yield item
        if emitted:
            after_title = isinstance(node, TitleNode)


def blocks_for_node(node: BookNode, env: BuildBlocksEnv, *, after_title: bool = False) -> Iterator[BlockWithPath]:
    if isinstance(node, ParagraphNode):
        yield BlockWithPath(block_for_paragraph(node, env, after_title=after_title), env.path)
    elif isinstance(node, TitleNode):
        yield BlockWithPath(title_block(node.lines, node.level, env), env.path)
    elif isinstance(node, GroupNode):
        yield from blocks_for_group(node, env)
    elif isinstance(node, ListNode):
        yield BlockWithPath(block_for_list(node, env), env.path)
    elif isinstance(node, TableNode):
        yield BlockWithPath(block_for_table(node, env), env.path)
    elif isinstance(node, SeparatorNode):
        yield BlockWithPath(RichTextBlock(fragments=[RuleFragment()]), env.path)
    elif isinstance(node, (ImageNode, IgnoreNode)):
        logger.debug("No block for %s node at %s", node.node, env.path)
    else:
        assert_never(node)


def block_for_paragraph(node: ParagraphNode, env: BuildBlocksEnv, *, after_title: bool = False) -> RichTextBlock:
    fragments = fragments_for_span(node.span, env)
    fragments = colorize_fragments(fragments, env.colorization, env.path)

    need_drop_caps = after_title and not env.dont_drop_caps
    if need_drop_caps:
        drop_caps = AttrsRange(start=0, end=1, attrs=RichTextAttrs(drop_caps=True))
        fragments = apply_attrs_range(fragments, drop_caps)

    return RichTextBlock(indent=not need_drop_caps, fragments=fragments)


def blocks_for_group(node: GroupNode, env: BuildBlocksEnv) -> Iterator[BlockWithPath]:
    footnote = has_semantic(node, "footnote")
    if footnote is not None:
        yield BlockWithPath(title_block(footnote.title, FOOTNOTE_TITLE_LEVEL, env), env.path)
        yield from blocks_for_nodes(node.nodes, env.suppress_drop_caps())
    else:
        yield from blocks_for_nodes(node.nodes, env)


def block_for_list(node: ListNode, env: BuildBlocksEnv) -> RichTextBlock:
    items = [fragments_for_span(i.item, env) for i in node.items]
    fragments: list[RichTextFragment] = [
        ListFragment(
            kind="unordered" if node.kind == "basic" else "ordered",
            items=items,
        ),
    ]
    fragments = colorize_fragments(fragments, env.colorization, env.path)
    return RichTextBlock(fragments=fragments)


def block_for_table(node: TableNode, env: BuildBlocksEnv) -> RichTextBlock:
    rows = [
        [fragments_for_span(cell, env) for cell in row.cells]
        for row in node.rows
    ]
    fragments: list[RichTextFragment] = [TableFragment(rows=rows)]
    fragments = colorize_fragments(fragments, env.colorization, env.path)
    return RichTextBlock(fragments=fragments)


def title_block(lines: list[str], level: int, env: BuildBlocksEnv) -> RichTextBlock:
    """
    Title block for a heading or footnote label.

    level 0 is the spaced-out top title, positive levels are enlarged
    headings and negative levels are italic footnote labels.

    Title blocks are never colorized, even when a highlight covers them.
    """
    attrs = RichTextAttrs(
        letter_spacing=TOP_TITLE_LETTER_SPACING if level == 0 else None,
        italic=True if level < 0 else None,
        font_size=env.font_size * HEADING_FONT_SCALE if level > 0 else env.font_size,
    )
    return RichTextBlock(
        margin=HEADING_MARGIN if level > 0 else TITLE_MARGIN,
        center=level >= 0,
        indent=False,
        fragments=[TextFragment(text=f"{line}\n", attrs=attrs) for line in lines],
    )
