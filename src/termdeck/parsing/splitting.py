from logging import getLogger
from re import compile as re_compile

_logger = getLogger(__name__)

_slide_heading = re_compile(r"#[ \t]")
_fence = re_compile(r"\s*```")


def split(document: str) -> list[str]:
    """Split a document into raw slide chunks.

    A slide starts at every level 1 heading (`# ` at the very start of a line) \
    outside of fenced code. Non-blank content before the first heading becomes its \
    own slide; blank content there is kept with the first slide so that joining the \
    chunks always gives back the document.

    Args:
        document: Full document text.

    Returns:
        Raw chunks, one per slide. Never empty: a document without any heading is a \
        single chunk.
    """
    chunks: list[str] = []
    current: list[str] = []
    in_fence = False
    for line in document.splitlines(keepends=True):
        if _fence.match(line):
            in_fence = not in_fence
        elif not in_fence and _slide_heading.match(line):
            if current and (chunks or "".join(current).strip()):
                chunks.append("".join(current))
                current = []
        current.append(line)
    if current or not chunks:
        chunks.append("".join(current))
    _logger.debug("Split document into %d slides", len(chunks))
    return chunks
