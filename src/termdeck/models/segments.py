"""Model classes for the output of inline tokenization."""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum
from functools import cached_property
from re import compile as re_compile

from .scalars import Scale

SIZE_SCALES: dict[str, Scale] = {
    "xx-small": Scale(1),
    "x-small": Scale(1),
    "small": Scale(1),
    "medium": Scale(2),
    "large": Scale(3),
    "x-large": Scale(4),
    "xx-large": Scale(5),
    "xxx-large": Scale(6),
    "xxxx-large": Scale(7),
    **{str(i): Scale(i) for i in range(1, 8)},
}
"""Size names accepted in tags, mapped to their scale."""

NAMED_COLORS: dict[str, str] = {
    "red": "FF5555",
    "green": "50FA7B",
    "yellow": "F1FA8C",
    "blue": "6272A4",
    "magenta": "FF79C6",
    "cyan": "8BE9FD",
    "white": "F8F8F2",
    "bright_red": "FF6E6E",
    "bright_green": "69FF94",
    "bright_yellow": "FFFFA5",
    "bright_blue": "D6ACFF",
    "bright_magenta": "FF92DF",
    "bright_cyan": "A4FFFF",
    "bright_white": "FFFFFF",
}

_hex_color = re_compile(r"[0-9a-fA-F]{6}")


class SegmentKind(Enum):
    Text = "text"
    Bold = "bold"
    Italic = "italic"
    Strikethrough = "strikethrough"
    Code = "code"
    Tag = "tag"
    Note = "note"


@dataclass(frozen=True)
class TagStyle:
    """Resolved meaning of a tag name.

    A tag name resolves either to a size or to a color, never both. When neither is \
    set, the tag could not be resolved and its content renders as plain text.
    """

    scale: Scale | None = None
    """Size scale of the tagged text."""

    color: str | None = None
    """Color of the tagged text, as an upper-case 6 digits hex string."""


@dataclass(frozen=True)
class Segment:
    """One styled run of inline text.

    A list of segments is a flat parse of one inline string: no segment owns \
    another one.
    """

    kind: SegmentKind
    """Kind of markup that produced the segment."""

    text: str
    """Visible text, markup delimiters excluded."""

    tag: str | None = None
    """Raw attribute name of [`Tag`][termdeck.models.segments.SegmentKind] \
    segments, e.g. `x-large`, `red` or `ff8800`."""

    @cached_property
    def style(self) -> TagStyle:
        if self.kind is not SegmentKind.Tag or self.tag is None:
            return TagStyle()
        return resolve_tag(self.tag)

    @property
    def scale(self) -> Scale | None:
        """Scale specified by the segment itself, if any."""
        return self.style.scale

    def with_text(self, text: str) -> "Segment":
        return replace(self, text=text)


def resolve_tag(name: str) -> TagStyle:
    """Resolve a tag name to a size or a color.

    Size names are tried first, then named colors, then 6 digits hex literals.

    Args:
        name: Tag name, as written in the `name` attribute.

    Returns:
        The resolved style. Both of its fields are None if the name is unknown.
    """
    if name in SIZE_SCALES:
        return TagStyle(scale=SIZE_SCALES[name])
    if name in NAMED_COLORS:
        return TagStyle(color=NAMED_COLORS[name])
    if _hex_color.fullmatch(name):
        return TagStyle(color=name.upper())
    return TagStyle()


def text_of(segments: Iterable[Segment]) -> str:
    return "".join(segment.text for segment in segments)
