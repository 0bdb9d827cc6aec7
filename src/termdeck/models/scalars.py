"""Model NewTypes and constants for sizes."""

from typing import NewType

Scale = NewType("Scale", int)
"""Derived from int to represent a size multiplier, between 1 and 7.

A scale of n means that one character occupies n rows and n times its display width \
in columns.
"""

MIN_SCALE = Scale(1)
MAX_SCALE = Scale(7)

DEFAULT_SCALE = Scale(2)
"""Scale of body text when nothing else specifies one."""

HEADING_SCALES: dict[int, Scale] = {1: Scale(4), 2: Scale(3), 3: Scale(2)}
"""Implicit scales of the most important heading levels.

Deeper heading levels are rendered with the default scale.
"""


def heading_scale(level: int) -> Scale:
    return HEADING_SCALES.get(level, DEFAULT_SCALE)
