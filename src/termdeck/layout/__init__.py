"""Lay out parsed slides on a grid of fixed-size cells.

- [`width`][termdeck.layout.width] measures characters in columns
- [`wrapping`][termdeck.layout.wrapping] breaks segments into lines
- [`height`][termdeck.layout.height] estimates the rows taken by blocks
"""

from .height import block_height, slide_height
from .width import char_width, display_width
from .wrapping import Line, align_offset, line_width, wrap

__all__ = [
    "Line",
    "align_offset",
    "block_height",
    "char_width",
    "display_width",
    "line_width",
    "slide_height",
    "wrap",
]
