"""
Reader - turns a book into rendered blocks and maps positions back.

This module provides:
- build_blocks_data: Flatten book nodes into blocks tagged with paths
- BlocksData: Blocks, paths and the translator of one build
- BuildBlocksEnv: Path, settings, images and highlights for a build
- fragments_for_span: Compile span markup into fragments
- project_range, colorize_fragments: Paint highlights onto blocks
- PathTranslator: BlockAddress <-> BookPath
- map_selection: Rendered selection -> BookSelection
- ReaderSession: Callbacks a presentation layer talks to
"""

from .env import BuildBlocksEnv
from .spans import convert_attrs, fragments_for_span
from .colorize import LocalRange, colorize_fragments, project_range
from .translate import PathTranslator
from .blocks import BlocksData, BlockWithPath, build_blocks_data
from .selection import map_selection
from .session import ReaderSession

__all__ = [
    "BuildBlocksEnv",
    "convert_attrs",
    "fragments_for_span",
    "LocalRange",
    "project_range",
    "colorize_fragments",
    "PathTranslator",
    "BlocksData",
    "BlockWithPath",
    "build_blocks_data",
    "map_selection",
    "ReaderSession",
]
