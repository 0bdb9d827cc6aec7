"""Model classes for the structural units of a slide.

Every block kind is its own frozen dataclass and
[`Block`][termdeck.models.blocks.Block] is their union, so that consumers select the \
behaviour with a `match` statement on the block class.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .scalars import Scale, heading_scale


class Alignment(Enum):
    Left = "left"
    Center = "center"
    Right = "right"


@dataclass(frozen=True)
class ListItem:
    text: str
    """Raw inline text of the item, continuation lines included."""

    depth: int = 0
    """Nesting depth, 0 for top-level items."""


@dataclass(frozen=True)
class Heading:
    level: int
    text: str

    @property
    def scale(self) -> Scale:
        return heading_scale(self.level)


@dataclass(frozen=True)
class Paragraph:
    text: str

    scale: Scale | None = None
    """Largest size scale requested by the size tags of the text, if any."""


@dataclass(frozen=True)
class CodeBlock:
    content: str
    """Verbatim code, each line terminated by a newline."""

    language: str | None = None


@dataclass(frozen=True)
class UnorderedList:
    items: tuple[ListItem, ...]


@dataclass(frozen=True)
class OrderedList:
    """Numbered list.

    The numbers written in the source are not kept: consumers number items \
    sequentially starting at 1.
    """

    items: tuple[ListItem, ...]


@dataclass(frozen=True)
class DefinitionList:
    term: str
    definition: str
    """Definition lines, newline-separated, markers and indentation stripped."""


@dataclass(frozen=True)
class Blockquote:
    content: str
    """Quoted lines, newline-separated, markers stripped."""


@dataclass(frozen=True)
class Table:
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def columns(self) -> int:
        return len(self.header)


@dataclass(frozen=True)
class Align:
    """Alignment directive for the next rendering block only."""

    alignment: Alignment


@dataclass(frozen=True)
class Image:
    path: str
    attrs: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    """Attributes of the kramdown attribute list following the image, if any."""

    alt: str = ""


@dataclass(frozen=True)
class Blank:
    pass


Block = (
    Heading
    | Paragraph
    | CodeBlock
    | UnorderedList
    | OrderedList
    | DefinitionList
    | Blockquote
    | Table
    | Align
    | Image
    | Blank
)
"""Alias to the union of all block kinds."""
