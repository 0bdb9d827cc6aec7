"""Model classes for parsed slides and presentations."""

from collections.abc import Iterator
from dataclasses import dataclass

from .blocks import Align, Alignment, Block


@dataclass(frozen=True)
class Slide:
    """Ordered blocks of one slide, in source order."""

    blocks: tuple[Block, ...] = ()

    def aligned_blocks(self) -> Iterator[tuple[Alignment | None, Block]]:
        """Yield rendering blocks with the alignment requested for them.

        [`Align`][termdeck.models.blocks.Align] blocks are consumed here: each one \
        applies to the next yielded block only.

        Yields:
            Pairs of the pending alignment (None if there is none) and the block.
        """
        pending: Alignment | None = None
        for block in self.blocks:
            if isinstance(block, Align):
                pending = block.alignment
                continue
            yield pending, block
            pending = None


@dataclass(frozen=True)
class Presentation:
    """Parsed document.

    Navigation state (the current slide) is not part of this class: it belongs to \
    whatever drives the presentation.
    """

    slides: tuple[Slide, ...]

    @property
    def total(self) -> int:
        return len(self.slides)
