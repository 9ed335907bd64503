"""
Common contract of the per-line highlighters.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.annotation import Annotation
from ..core.line import Line


class SyntaxHighlighter(ABC):
    """
    Scans lines in document order and caches their annotations.

    Lines must be highlighted as 0, 1, 2, ... since a line's annotations can
    depend on the lines before it.
    """

    @abstractmethod
    def highlight(self, idx: int, line: Line) -> None:
        """Scan line idx and cache its annotations."""

    @abstractmethod
    def get_annotations(self, idx: int) -> Optional[List[Annotation]]:
        """Get the cached annotations of line idx, or None if it was not scanned yet."""
