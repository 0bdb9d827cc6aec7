"""Estimate the number of grid rows taken by blocks once laid out.

Renderers use these estimates to center a slide vertically before drawing it.
"""

from ..models import (
    DEFAULT_SCALE,
    Align,
    Blank,
    Block,
    Blockquote,
    CodeBlock,
    DefinitionList,
    Heading,
    Image,
    OrderedList,
    Paragraph,
    Scale,
    Slide,
    Table,
    UnorderedList,
)
from ..parsing.inline import parse_inline
from .wrapping import wrap

DEFAULT_IMAGE_HEIGHT = 40
"""Percentage of the screen height taken by images without `relative_height`."""


def text_rows(text: str, max_width: int, scale: Scale) -> int:
    """Count the rows taken by the inline string `text` wrapped at `max_width`."""
    lines = wrap(parse_inline(text), max_width, scale)
    return len(lines) * scale


def block_height(
    block: Block,
    max_width: int,
    default_scale: Scale = DEFAULT_SCALE,
    screen_height: int | None = None,
) -> int:
    """Estimate the rows taken by `block`.

    Args:
        block: Block to measure.
        max_width: Columns available to the block.
        default_scale: Scale of body text.
        screen_height: Rows of the screen, needed to size images.

    Returns:
        Estimated number of rows, zero for blocks that take no room.
    """
    match block:
        case Heading(text=text):
            return text_rows(text, max_width, block.scale)
        case Paragraph(text=text, scale=scale):
            return text_rows(text, max_width, scale or default_scale)
        case CodeBlock(content=content):
            return max(len(content.splitlines()), 1)
        case UnorderedList(items=items) | OrderedList(items=items):
            return sum(text_rows(item.text, max_width, default_scale) for item in items)
        case DefinitionList(term=term, definition=definition):
            return text_rows(term, max_width, default_scale) + sum(
                text_rows(line, max_width, default_scale)
                for line in definition.splitlines()
            )
        case Blockquote(content=content):
            return sum(
                text_rows(line, max_width, default_scale)
                for line in content.splitlines()
            )
        case Table(header=header, rows=rows):
            if not header:
                return 0
            return 2 + len(rows)
        case Image(attrs=attrs):
            if screen_height is None:
                return 1
            percentage = _relative_height(attrs.get("relative_height"))
            return max(screen_height * percentage // 100, 1)
        case Align():
            return 0
        case Blank():
            return 1


def slide_height(
    slide: Slide,
    max_width: int,
    default_scale: Scale = DEFAULT_SCALE,
    screen_height: int | None = None,
) -> int:
    return sum(
        block_height(block, max_width, default_scale, screen_height)
        for block in slide.blocks
    )


def _relative_height(value: str | None) -> int:
    if value is None or not value.isdigit():
        return DEFAULT_IMAGE_HEIGHT
    return int(value)
