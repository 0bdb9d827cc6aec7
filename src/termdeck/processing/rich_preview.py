"""Render slides as plain terminal text with rich styles.

The preview honors the line breaks that the scale of each segment implies but prints \
every character at normal size: it shows where text wraps, not how big it is.
"""

from collections.abc import Callable, Iterator

from rich.console import RenderableType
from rich.style import Style
from rich.table import Table as RichTable
from rich.text import Text

from ..configuring.settings import Settings
from ..layout import Line, align_offset, line_width, wrap
from ..models import (
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
    Scale,
    Segment,
    SegmentKind,
    Slide,
    Table,
    UnorderedList,
)
from ..parsing import parse_inline, visible_segments

BULLET = "・"


class SlidePreviewer:
    def __init__(self, settings: Settings) -> None:
        self._width = settings.width
        self._default_scale = Scale(settings.default_scale)
        self._show_notes = settings.show_notes
        self._colors = settings.theme.colors

    def preview(self, slide: Slide) -> Iterator[RenderableType]:
        for alignment, block in slide.aligned_blocks():
            yield from self._block(block, alignment)

    def _block(
        self, block: Block, alignment: Alignment | None
    ) -> Iterator[RenderableType]:
        match block:
            case Heading(level=level, text=text):
                heading_color = self._colors.heading or self._colors.foreground
                heading_style = Style(bold=True, color=f"#{heading_color}")
                yield from self._lines(
                    text,
                    block.scale,
                    alignment or (Alignment.Center if level == 1 else None),
                    base_style=heading_style,
                )
            case Paragraph(text=text, scale=scale):
                yield from self._lines(text, scale or self._default_scale, alignment)
            case CodeBlock(content=content):
                style = Style(bgcolor=f"#{self._colors.code_bg}")
                for line in content.splitlines() or [""]:
                    yield Text(f"  {line}  ", style=style)
            case UnorderedList(items=items):
                yield from self._items(items, lambda _: BULLET)
            case OrderedList(items=items):
                numbers = _numbering(items)
                yield from self._items(items, lambda i: f"{numbers[i]}. ")
            case DefinitionList(term=term, definition=definition):
                yield from self._lines(
                    term, self._default_scale, alignment, base_style=Style(bold=True)
                )
                for line in definition.splitlines():
                    yield from self._lines(line, self._default_scale, None, indent=4)
            case Blockquote(content=content):
                for line in content.splitlines():
                    yield from self._lines(
                        line,
                        self._default_scale,
                        None,
                        prefix=Text("| ", style=f"#{self._colors.dim}"),
                    )
            case Table(header=header, rows=rows):
                if header:
                    table = RichTable(*header, show_lines=False)
                    for row in rows:
                        table.add_row(*row)
                    yield table
            case Image(path=path, alt=alt):
                yield Text(f"[image {alt or path}]", style=f"#{self._colors.dim}")
            case Blank():
                yield Text()
            case Align():
                pass

    def _items(
        self, items: tuple[ListItem, ...], marker: Callable[[int], str]
    ) -> Iterator[RenderableType]:
        for index, item in enumerate(items):
            yield from self._lines(
                item.text,
                self._default_scale,
                None,
                indent=item.depth * 2,
                prefix=Text(marker(index)),
            )

    def _lines(
        self,
        text: str,
        scale: Scale,
        alignment: Alignment | None,
        indent: int = 0,
        prefix: Text | None = None,
        base_style: Style | None = None,
    ) -> Iterator[Text]:
        prefix = prefix or Text()
        available = (
            max(self._width - indent - prefix.cell_len, 1) if self._width > 0 else 0
        )
        segments = visible_segments(parse_inline(text), show_notes=self._show_notes)
        for number, line in enumerate(wrap(segments, available, scale)):
            offset = indent + align_offset(
                line_width(line, scale), available, alignment
            )
            rendered = Text(" " * offset)
            if number == 0:
                rendered.append_text(prefix)
            else:
                rendered.append(" " * prefix.cell_len)
            rendered.append_text(self._line_text(line, base_style))
            yield rendered

    def _line_text(self, line: Line, base_style: Style | None) -> Text:
        text = Text(style=base_style or "")
        for segment in line:
            text.append(segment.text, style=self._segment_style(segment))
        return text

    def _segment_style(self, segment: Segment) -> Style:
        match segment.kind:
            case SegmentKind.Bold:
                return Style(bold=True)
            case SegmentKind.Italic:
                return Style(italic=True)
            case SegmentKind.Strikethrough:
                return Style(strike=True)
            case SegmentKind.Code:
                return Style(
                    color=f"#{self._colors.inline_code}",
                    bgcolor=f"#{self._colors.code_bg}",
                )
            case SegmentKind.Note:
                return Style(color=f"#{self._colors.dim}", italic=True)
            case SegmentKind.Tag if (color := segment.style.color) is not None:
                return Style(color=f"#{color}")
            case _:
                return Style()


def _numbering(items: tuple[ListItem, ...]) -> list[int]:
    """Number items sequentially from 1 within each nesting level."""
    counters: dict[int, int] = {}
    numbers = []
    for item in items:
        counters = {d: n for d, n in counters.items() if d <= item.depth}
        counters[item.depth] = counters.get(item.depth, 0) + 1
        numbers.append(counters[item.depth])
    return numbers

