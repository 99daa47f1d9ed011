from __future__ import annotations
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping

from ..book.nodes import ImageData
from ..book.path import BookPath
from ..book.ranges import ColorizedRange
from ..config import RenderSettings


@dataclass(frozen=True)
class BuildBlocksEnv:
    """
    Everything block building needs besides the node itself.

    Passed by value down the tree: each level derives its own env with
    `child()` or `replace()`, so sibling subtrees never share a path.

    Attributes:
        path: Path of the node being built
        settings: Font and color settings
        images: Image dictionary, resolved before building starts
        colorization: Highlight ranges to paint onto the blocks
        dont_drop_caps: Suppress drop caps (set inside footnote groups)
    """
    path: BookPath = field(default_factory=BookPath.root)
    settings: RenderSettings = field(default_factory=RenderSettings)
    images: Mapping[str, ImageData] = field(default_factory=dict)
    colorization: tuple[ColorizedRange, ...] = ()
    dont_drop_caps: bool = False

    def __post_init__(self):
        if not isinstance(self.images, MappingProxyType):
            object.__setattr__(self, 'images', MappingProxyType(dict(self.images)))
        object.__setattr__(self, 'colorization', tuple(self.colorization))

    @classmethod
    def create(
        cls,
        settings: RenderSettings | None = None,
        images: Mapping[str, ImageData] | None = None,
        colorization: Iterable[ColorizedRange] | None = None,
    ) -> BuildBlocksEnv:
        return cls(
            settings=settings or RenderSettings(),
            images=images or {},
            colorization=tuple(colorization or ()),
        )

    @property
    def font_size(self) -> float:
        return self.settings.font_size

    @property
    def ref_color(self) -> str:
        return self.settings.ref_color

    @property
    def ref_hover_color(self) -> str:
        return self.settings.ref_hover_color

    def child(self, index: int) -> BuildBlocksEnv:
        return replace(self, path=self.path.child(index))

    def suppress_drop_caps(self) -> BuildBlocksEnv:
        return replace(self, dont_drop_caps=True)
