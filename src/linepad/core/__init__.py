"""
Core package for the text model of the editor.

This package implements the grapheme-aware Line, the AnnotatedString overlay
that keeps annotation ranges consistent while text is spliced, and the
small value types shared with the highlighters.
"""

from .annotated_string import AnnotatedString, AnnotatedStringPart
from .annotation import Annotation, AnnotationType
from .filetype import FileType
from .line import GraphemeWidth, Line, TextFragment
from .location import Location

__all__ = [
    'AnnotatedString',
    'AnnotatedStringPart',
    'Annotation',
    'AnnotationType',
    'FileType',
    'GraphemeWidth',
    'Line',
    'Location',
    'TextFragment'
]
