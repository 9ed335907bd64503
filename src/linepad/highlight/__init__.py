"""
Highlighting package.

This package implements per-line highlighting. It includes the Rust syntax
highlighter, which carries open comments and strings from line to line, the
search result highlighter and the Highlighter facade combining them.
"""

from .base import SyntaxHighlighter
from .factory import Highlighter, create_syntax_highlighter
from .rust import HighlightState, LexicalMode, RustSyntaxHighlighter
from .search import SearchResultHighlighter

__all__ = [
    'Highlighter',
    'HighlightState',
    'LexicalMode',
    'RustSyntaxHighlighter',
    'SearchResultHighlighter',
    'SyntaxHighlighter',
    'create_syntax_highlighter'
]
