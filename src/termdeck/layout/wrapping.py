"""Break styled text into lines that fit a width."""

from collections.abc import Iterable, Sequence

from ..models import Alignment, Scale, Segment
from .width import char_width, display_width

Line = list[Segment]


def effective_scale(segment: Segment, default_scale: Scale) -> Scale:
    return segment.scale or default_scale


def line_width(segments: Iterable[Segment], default_scale: Scale) -> int:
    """Compute the number of columns taken by `segments` once scaled."""
    return sum(
        display_width(segment.text) * effective_scale(segment, default_scale)
        for segment in segments
    )


def wrap(
    segments: Sequence[Segment], max_width: int, default_scale: Scale
) -> list[Line]:
    """Wrap `segments` into lines of at most `max_width` columns.

    Segments are split at character boundaries when they overflow. All the parts of a \
    split segment keep its kind and tag, so styling carries over the line breaks. A \
    single character wider than `max_width` gets a line of its own, which is the only \
    case where a line overflows.

    Args:
        segments: Segments to lay out, in order.
        max_width: Available columns. Zero or less disables wrapping.
        default_scale: Scale of the segments that do not specify their own.

    Returns:
        Lines of segments. Joining their texts gives back the texts of `segments`. \
        There is always at least one line, possibly empty.
    """
    if max_width <= 0:
        return [[segment for segment in segments if segment.text]]
    lines: list[Line] = []
    current: Line = []
    used = 0
    for segment in segments:
        scale = effective_scale(segment, default_scale)
        text = segment.text
        while text:
            fitting, width = _fit(text, max_width - used, scale)
            if fitting == 0:
                if current:
                    lines.append(current)
                    current, used = [], 0
                    continue
                fitting, width = 1, char_width(text[0]) * scale
            current.append(segment.with_text(text[:fitting]))
            used += width
            text = text[fitting:]
            if text:
                lines.append(current)
                current, used = [], 0
    if current or not lines:
        lines.append(current)
    return lines


def _fit(text: str, available: int, scale: Scale) -> tuple[int, int]:
    """Count the leading characters of `text` that fit in `available` columns.

    Returns:
        The number of characters and the columns they take.
    """
    used = 0
    for count, char in enumerate(text):
        width = char_width(char) * scale
        if used + width > available:
            return count, used
        used += width
    return len(text), used


def align_offset(width: int, max_width: int, alignment: Alignment | None) -> int:
    """Compute the left padding that aligns a line of `width` columns."""
    slack = max(max_width - width, 0)
    match alignment:
        case Alignment.Center:
            return slack // 2
        case Alignment.Right:
            return slack
        case _:
            return 0
