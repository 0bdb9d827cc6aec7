"""Tokenize one line of inline markup into styled segments.

The recognized markup is the kramdown flavour used by Rabbit presentations:

- `{::tag name="x-large"}text{:/tag}` for sizes and colors
- `{::note}text{:/note}` for speaker notes
- `{::wait/}` pause markers, dropped since slides are rendered at once
- `` `code` ``, `**bold**`, `*italic*` and `~~strikethrough~~`

Unterminated markup never fails: it degrades to literal text.
"""

from collections.abc import Iterable
from logging import getLogger
from re import DOTALL, compile as re_compile

from ..models import (
    NAMED_COLORS,
    SIZE_SCALES,
    Scale,
    Segment,
    SegmentKind,
    TagStyle,
    resolve_tag,
)

_logger = getLogger(__name__)

__all__ = [
    "NAMED_COLORS",
    "SIZE_SCALES",
    "max_inline_scale",
    "parse_inline",
    "resolve_tag",
    "visible_segments",
]

_tag = re_compile(r'\{::tag\s+name="([^"]+)"\}(.*?)\{:/tag\}', DOTALL)
_note = re_compile(r"\{::note\}(.*?)\{:/note\}", DOTALL)
_wait = re_compile(r"\{::wait/\}")
_code = re_compile(r"`([^`]+)`")
_bold = re_compile(r"\*\*(.+?)\*\*", DOTALL)
_italic = re_compile(r"\*(.+?)\*", DOTALL)
_strikethrough = re_compile(r"~~(.+?)~~", DOTALL)
_plain = re_compile(r"[^`*~{]+|.", DOTALL)

_delimited = (
    (_code, SegmentKind.Code),
    (_bold, SegmentKind.Bold),
    (_italic, SegmentKind.Italic),
    (_strikethrough, SegmentKind.Strikethrough),
)


def parse_inline(text: str) -> list[Segment]:
    """Tokenize `text` into segments.

    At each position, markup is tried by priority: tags, notes, wait markers, code, \
    bold, italic and strikethrough. When nothing matches, the longest run of \
    characters that cannot start markup is consumed, or a single character if the \
    current one does (e.g. an unmatched `*`). Adjacent plain text is merged into a \
    single segment.

    Args:
        text: Inline string to tokenize.

    Returns:
        Segments in source order. Concatenating their texts gives `text` without its \
        markup delimiters.
    """
    segments: list[Segment] = []
    position = 0
    while position < len(text):
        if match := _tag.match(text, position):
            name = match[1]
            if resolve_tag(name) == TagStyle():
                _logger.debug("Unresolved tag name %r, rendering as text", name)
            segments.append(Segment(SegmentKind.Tag, match[2], tag=name))
        elif match := _note.match(text, position):
            segments.append(Segment(SegmentKind.Note, match[1]))
        elif match := _wait.match(text, position):
            pass
        else:
            for pattern, kind in _delimited:
                if match := pattern.match(text, position):
                    segments.append(Segment(kind, match[1]))
                    break
            else:
                match = _plain.match(text, position)
                assert match is not None
                _append_text(segments, match[0])
        position = match.end()
    return segments


def _append_text(segments: list[Segment], text: str) -> None:
    if segments and segments[-1].kind is SegmentKind.Text:
        segments[-1] = segments[-1].with_text(segments[-1].text + text)
    else:
        segments.append(Segment(SegmentKind.Text, text))


def visible_segments(
    segments: Iterable[Segment], show_notes: bool = False
) -> list[Segment]:
    """Filter out speaker notes unless asked to keep them."""
    return [s for s in segments if show_notes or s.kind is not SegmentKind.Note]


def max_inline_scale(text: str) -> Scale | None:
    """Compute the largest scale requested by the size tags of `text`.

    Args:
        text: Raw inline string.

    Returns:
        The largest scale found, or None if `text` has no size tag.
    """
    scales = [s.scale for s in parse_inline(text) if s.scale is not None]
    return max(scales, default=None)
