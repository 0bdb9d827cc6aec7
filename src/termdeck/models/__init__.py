"""Model classes produced by the parsing side of termdeck.

The classes of this package are plain frozen dataclasses and hold as little logic as \
possible.

- [`blocks`][termdeck.models.blocks] contains one class per structural unit of a \
    slide (headings, lists, tables...)
- [`scalars`][termdeck.models.scalars] contains the scale NewType and the constants \
    tied to it
- [`segments`][termdeck.models.segments] contains the styled runs of text produced by \
    inline tokenization
- [`slides`][termdeck.models.slides] contains slides and whole presentations
"""

from .blocks import (
    Align,
    Alignment,
    Blank,
    Block,
    Blockquote,
    CodeBlock,
    DefinitionList,
    Heading,
    Image,
    ListItem,
    OrderedList,
    Paragraph,
    Table,
    UnorderedList,
)
from .scalars import (
    DEFAULT_SCALE,
    HEADING_SCALES,
    MAX_SCALE,
    MIN_SCALE,
    Scale,
    heading_scale,
)
from .segments import (
    NAMED_COLORS,
    SIZE_SCALES,
    Segment,
    SegmentKind,
    TagStyle,
    resolve_tag,
    text_of,
)
from .slides import Presentation, Slide

__all__ = [
    "DEFAULT_SCALE",
    "HEADING_SCALES",
    "MAX_SCALE",
    "MIN_SCALE",
    "NAMED_COLORS",
    "SIZE_SCALES",
    "Align",
    "Alignment",
    "Blank",
    "Block",
    "Blockquote",
    "CodeBlock",
    "DefinitionList",
    "Heading",
    "Image",
    "ListItem",
    "OrderedList",
    "Paragraph",
    "Presentation",
    "Scale",
    "Segment",
    "SegmentKind",
    "Slide",
    "Table",
    "TagStyle",
    "UnorderedList",
    "heading_scale",
    "resolve_tag",
    "text_of",
]
