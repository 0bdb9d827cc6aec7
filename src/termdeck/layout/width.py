"""Measure text in grid columns.

Characters whose East Asian Width property is Wide or Fullwidth take two columns, \
every other character takes one.
"""

from unicodedata import east_asian_width


def char_width(char: str) -> int:
    """Compute the number of columns taken by `char`, 1 or 2."""
    return 2 if east_asian_width(char) in ("W", "F") else 1


def display_width(text: str) -> int:
    return sum(char_width(char) for char in text)
