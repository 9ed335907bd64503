"""
Linepad: grapheme-aware line model, annotation overlay and incremental
per-line syntax highlighting for terminal text editors.
"""

from .core import (
    AnnotatedString,
    AnnotatedStringPart,
    Annotation,
    AnnotationType,
    FileType,
    Line,
    Location
)
from .highlight import Highlighter

__version__ = '0.1.0'

__all__ = [
    'AnnotatedString',
    'AnnotatedStringPart',
    'Annotation',
    'AnnotationType',
    'FileType',
    'Highlighter',
    'Line',
    'Location'
]
