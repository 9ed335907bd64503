"""
Annotation types and tagged text ranges used for highlighting.
"""

from dataclasses import dataclass
from enum import Enum


class AnnotationType(Enum):
    """Kinds of text a range can be tagged with."""

    MATCH = 'match'
    SELECTED_MATCH = 'selected_match'
    NUMBER = 'number'
    KEYWORD = 'keyword'
    TYPE = 'type'
    KNOWN_VALUE = 'known_value'
    CHAR = 'char'
    LIFETIME_SPECIFIER = 'lifetime_specifier'
    COMMENT = 'comment'
    STRING = 'string'


@dataclass
class Annotation:
    """A half-open text range [start, end) tagged with an annotation type."""
    annotation_type: AnnotationType
    start: int
    end: int

    def shift(self, offset: int) -> None:
        """Move both bounds by the given offset."""

        self.start = max(0, self.start + offset)
        self.end = max(0, self.end + offset)
