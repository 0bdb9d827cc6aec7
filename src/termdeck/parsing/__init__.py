"""Turn documents into [`Presentation`][termdeck.models.Presentation]s.

- [`splitting`][termdeck.parsing.splitting] cuts a document into raw slide chunks
- [`blocks`][termdeck.parsing.blocks] recognizes the blocks of one chunk
- [`inline`][termdeck.parsing.inline] tokenizes inline markup into segments
"""

from logging import getLogger
from pathlib import Path

from ..models import Presentation
from .blocks import parse_slide
from .inline import parse_inline, resolve_tag, visible_segments
from .splitting import split

__all__ = [
    "load",
    "parse",
    "parse_inline",
    "parse_slide",
    "resolve_tag",
    "split",
    "visible_segments",
]

_logger = getLogger(__name__)


def parse(document: str) -> Presentation:
    """Split `document` into slides and parse each one of them."""
    return Presentation(tuple(parse_slide(chunk) for chunk in split(document)))


def load(path: Path) -> Presentation:
    """Read and parse the document at `path`.

    Args:
        path: Path to a UTF-8 encoded document.

    Raises:
        DocumentNotFoundError: Raised if there is no file at `path`.

    Returns:
        The parsed presentation.
    """
    from ..exceptions import DocumentNotFoundError

    if not path.is_file():
        msg = f"could not find document {path}"
        raise DocumentNotFoundError(msg)
    presentation = parse(path.read_text(encoding="utf8"))
    _logger.debug("Parsed %s into %d slides", path, presentation.total)
    return presentation
