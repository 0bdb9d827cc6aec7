"""Recognize the blocks of one slide.

Parsing is a single pass over the lines of the slide. Each block kind has a handler \
that looks at the line under the cursor and either declines it or returns the block \
it recognized along with the index of the first line it did not consume. Handlers are \
tried in a fixed order and the paragraph handler accepts anything, so every line ends \
up classified.
"""

from collections.abc import Callable
from logging import getLogger
from re import Match, Pattern, compile as re_compile
from types import MappingProxyType

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
    Slide,
    Table,
    UnorderedList,
)
from .inline import max_inline_scale

_logger = getLogger(__name__)

UNORDERED_INDENT = 2
"""Spaces per nesting level of unordered lists."""

ORDERED_INDENT = 3
"""Spaces per nesting level of ordered lists."""

_comment_open = re_compile(r"\s*\{::comment\}\s*")
_comment_close = re_compile(r"\s*\{:/comment\}\s*")
_align = re_compile(r"\s*\{:\.(center|right)\}\s*")
_fence_open = re_compile(r"\s*```\s*([^\s`]*)\s*")
_fence_close = re_compile(r"\s*```\s*")
_attribute_line = re_compile(r'\s*\{:\s*((?:[\w-]+="[^"]*"\s*)+)\}\s*')
_attribute = re_compile(r'([\w-]+)="([^"]*)"')
_indented = re_compile(r"(?: {4}|\t)(.*)")
_heading = re_compile(r"(#{1,6})\s+(.*)")
_blockquote = re_compile(r"\s*>\s?(.*)")
_table_row = re_compile(r"\s*\|")
_table_separator = re_compile(r"[\s|:-]*")
_image = re_compile(
    r'\s*!\[([^\]]*)\]\(([^)\s]+)(?:\s+"[^"]*")?\)\s*(?:\{:?\s*([^}]*)\})?\s*'
)
_bullet = re_compile(r"( *)[-*]\s+(.*)")
_continuation = re_compile(r" {2,}(\S.*)")
_numbered = re_compile(r"( *)\d+\.\s+(.*)")
_definition = re_compile(r": {3}(?! )(.*)")
_definition_continuation = re_compile(r" {4}(.*)")

_Handled = tuple[Block | None, int]
_Handler = Callable[[int], _Handled | None]


def parse_slide(raw: str) -> Slide:
    """Parse the raw text of one slide.

    Args:
        raw: Slide chunk, as returned by [`split`][termdeck.parsing.split].

    Returns:
        The slide, with its blocks in source order.
    """
    return SlideParser(raw.splitlines()).parse()


def parse_attributes(attributes: str) -> dict[str, str]:
    """Parse the `key="value"` pairs of a kramdown attribute list."""
    return {match[1]: match[2] for match in _attribute.finditer(attributes)}


class SlideParser:
    def __init__(self, lines: list[str]) -> None:
        self._lines = tuple(lines)
        self._handlers: tuple[_Handler, ...] = (
            self._comment,
            self._align,
            self._fenced_code,
            self._indented_code,
            self._heading,
            self._blockquote,
            self._table,
            self._image,
            self._unordered_list,
            self._ordered_list,
            self._blank,
            self._definition_list,
            self._paragraph,
        )

    def parse(self) -> Slide:
        blocks: list[Block] = []
        index = 0
        while index < len(self._lines):
            for handler in self._handlers:
                handled = handler(index)
                if handled is not None:
                    block, index = handled
                    if block is not None:
                        blocks.append(block)
                    break
        return Slide(tuple(blocks))

    def _match(self, index: int, pattern: Pattern[str]) -> Match[str] | None:
        if index >= len(self._lines):
            return None
        return pattern.match(self._lines[index])

    def _fullmatch(self, index: int, pattern: Pattern[str]) -> Match[str] | None:
        if index >= len(self._lines):
            return None
        return pattern.fullmatch(self._lines[index])

    def _comment(self, index: int) -> _Handled | None:
        if not self._fullmatch(index, _comment_open):
            return None
        end = index + 1
        while end < len(self._lines) and not self._fullmatch(end, _comment_close):
            end += 1
        _logger.debug("Skipping comment on lines %d to %d", index + 1, end + 1)
        return None, end + 1

    def _align(self, index: int) -> _Handled | None:
        if match := self._fullmatch(index, _align):
            return Align(Alignment(match[1])), index + 1
        return None

    def _fenced_code(self, index: int) -> _Handled | None:
        match = self._fullmatch(index, _fence_open)
        if not match:
            return None
        language = match[1] or None
        end = index + 1
        while end < len(self._lines) and not self._fullmatch(end, _fence_close):
            end += 1
        content = "".join(f"{line}\n" for line in self._lines[index + 1 : end])
        return self._code_block(content, language, end + 1)

    def _indented_code(self, index: int) -> _Handled | None:
        if not self._lines[index].strip() or not self._match(index, _indented):
            return None
        code_lines: list[str] = []
        end = index
        while match := self._match(end, _indented):
            code_lines.append(match[1])
            end += 1
        while not code_lines[-1].strip():
            code_lines.pop()
        content = "".join(f"{line}\n" for line in code_lines)
        return self._code_block(content, None, end)

    def _code_block(self, content: str, language: str | None, end: int) -> _Handled:
        if match := self._fullmatch(end, _attribute_line):
            language = parse_attributes(match[1]).get("lang", language)
            end += 1
        return CodeBlock(content, language), end

    def _heading(self, index: int) -> _Handled | None:
        if match := self._match(index, _heading):
            return Heading(len(match[1]), match[2].strip()), index + 1
        return None

    def _blockquote(self, index: int) -> _Handled | None:
        quoted: list[str] = []
        end = index
        while match := self._match(end, _blockquote):
            quoted.append(match[1])
            end += 1
        if not quoted:
            return None
        return Blockquote("\n".join(quoted)), end

    def _table(self, index: int) -> _Handled | None:
        rows: list[tuple[str, ...]] = []
        end = index
        while self._match(end, _table_row):
            line = self._lines[end]
            end += 1
            if _table_separator.fullmatch(line):
                continue
            rows.append(_split_cells(line))
        if end == index:
            return None
        if not rows:
            return Table(header=()), end
        return Table(header=rows[0], rows=tuple(rows[1:])), end

    def _image(self, index: int) -> _Handled | None:
        match = self._fullmatch(index, _image)
        if not match:
            return None
        attrs = parse_attributes(match[3] or "")
        return Image(match[2], MappingProxyType(attrs), alt=match[1]), index + 1

    def _unordered_list(self, index: int) -> _Handled | None:
        match = self._match(index, _bullet)
        if not match:
            return None
        items = [_list_item(match, UNORDERED_INDENT)]
        end = index + 1
        while end < len(self._lines):
            # A bullet wins over a continuation, even at exactly one indent unit.
            if match := self._match(end, _bullet):
                items.append(_list_item(match, UNORDERED_INDENT))
            elif match := self._match(end, _continuation):
                last = items[-1]
                items[-1] = ListItem(f"{last.text} {match[1].strip()}", last.depth)
            else:
                break
            end += 1
        return UnorderedList(tuple(items)), end

    def _ordered_list(self, index: int) -> _Handled | None:
        items: list[ListItem] = []
        end = index
        while match := self._match(end, _numbered):
            items.append(_list_item(match, ORDERED_INDENT))
            end += 1
        if not items:
            return None
        return OrderedList(tuple(items)), end

    def _blank(self, index: int) -> _Handled | None:
        if self._lines[index].strip():
            return None
        return Blank(), index + 1

    def _definition_list(self, index: int) -> _Handled | None:
        match = self._match(index + 1, _definition)
        if not match:
            return None
        definition = [match[1].strip()]
        end = index + 2
        while end < len(self._lines):
            match = self._match(end, _definition) or self._match(
                end, _definition_continuation
            )
            if not match:
                break
            definition.append(match[1].strip())
            end += 1
        return DefinitionList(self._lines[index].strip(), "\n".join(definition)), end

    def _paragraph(self, index: int) -> _Handled:
        line = self._lines[index]
        return Paragraph(line.strip(), max_inline_scale(line)), index + 1


def _split_cells(line: str) -> tuple[str, ...]:
    cells = [cell.strip() for cell in line.strip().split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return tuple(cells)


def _list_item(match: Match[str], indent: int) -> ListItem:
    return ListItem(match[2].strip(), depth=len(match[1]) // indent)
