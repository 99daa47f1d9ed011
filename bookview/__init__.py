from .book import BookDocument, BookPath, BookSelection, ColorizedRange
from .config import RenderSettings
from .reader import BlocksData, ReaderSession, build_blocks_data
from .richtext import BlockAddress, RichTextBlock
from .utils import UnknownVariantError

__all__ = [
    "BookDocument",
    "BookPath",
    "BookSelection",
    "ColorizedRange",
    "RenderSettings",
    "BlocksData",
    "ReaderSession",
    "build_blocks_data",
    "BlockAddress",
    "RichTextBlock",
    "UnknownVariantError",
]
