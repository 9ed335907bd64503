"""
Location of a grapheme inside a multi-line document.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A line index paired with a grapheme index on that line."""
    line_idx: int = 0
    grapheme_idx: int = 0
