"""
Factory and facade for the highlighters attached to a document.
"""

from typing import Dict, Iterable, List, Optional, Type

from ..core.annotation import Annotation
from ..core.filetype import FileType
from ..core.line import Line
from ..core.location import Location
from .base import SyntaxHighlighter
from .rust import RustSyntaxHighlighter
from .search import SearchResultHighlighter

SYNTAX_HIGHLIGHTERS: Dict[FileType, Type[SyntaxHighlighter]] = {
    FileType.RUST: RustSyntaxHighlighter,
}


def create_syntax_highlighter(file_type: FileType) -> Optional[SyntaxHighlighter]:
    """Create the syntax highlighter of a file type, or None if it has no grammar."""

    highlighter_cls = SYNTAX_HIGHLIGHTERS.get(file_type)
    if highlighter_cls is None:
        return None

    return highlighter_cls()


class Highlighter:
    """
    Combines syntax and search result highlighting for one render pass.

    A new instance is created for every pass, and lines are fed to it in
    document order from the first line down to the last visible one.
    """

    def __init__(
            self,
            matched_word: Optional[str] = None,
            selected_match: Optional[Location] = None,
            file_type: FileType = FileType.TEXT) -> None:
        self.syntax_highlighter = create_syntax_highlighter(file_type)
        self.search_result_highlighter = None

        if matched_word:
            self.search_result_highlighter = SearchResultHighlighter(matched_word, selected_match)

    def highlight(self, idx: int, line: Line) -> None:
        """Highlight line idx with every attached highlighter."""

        if self.syntax_highlighter is not None:
            self.syntax_highlighter.highlight(idx, line)

        if self.search_result_highlighter is not None:
            self.search_result_highlighter.highlight(idx, line)

    def highlight_lines(self, lines: Iterable[Line], until: Optional[int] = None) -> None:
        """Highlight lines in order, stopping before line until if given."""

        for idx, line in enumerate(lines):
            if until is not None and idx >= until:
                break
            self.highlight(idx, line)

    def get_annotations(self, idx: int) -> List[Annotation]:
        """
        Get every annotation of line idx.

        Search results come before syntax annotations. A match is drawn where
        it starts at or before an overlapping syntax run; a syntax run that
        starts earlier hides the match up to the run's end.
        """

        result: List[Annotation] = []

        if self.search_result_highlighter is not None:
            result.extend(self.search_result_highlighter.get_annotations(idx) or [])

        if self.syntax_highlighter is not None:
            result.extend(self.syntax_highlighter.get_annotations(idx) or [])

        return result
