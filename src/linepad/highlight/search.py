"""
Highlighting of search results.
"""

from typing import Dict, List, Optional

from ..core.annotation import Annotation, AnnotationType
from ..core.line import Line
from ..core.location import Location


class SearchResultHighlighter:
    """Annotates every occurrence of the search query and the selected match."""

    def __init__(self, matched_word: str, selected_match: Optional[Location] = None) -> None:
        self.matched_word = matched_word
        self.selected_match = selected_match
        self._highlights: Dict[int, List[Annotation]] = {}

    def _highlight_selected_match(self, idx: int, line: Line, result: List[Annotation]) -> None:
        if self.selected_match is None or self.selected_match.line_idx != idx:
            return

        grapheme_idx = min(self.selected_match.grapheme_idx, line.grapheme_count())
        start = line.grapheme_idx_to_text_offset(grapheme_idx)

        result.append(Annotation(
            AnnotationType.SELECTED_MATCH,
            start,
            start + len(self.matched_word)
        ))

    def _highlight_matched_words(self, line: Line, result: List[Annotation]) -> None:
        for start, _ in line.find_all(self.matched_word, range(0, len(line))):
            result.append(Annotation(
                AnnotationType.MATCH,
                start,
                start + len(self.matched_word)
            ))

    def highlight(self, idx: int, line: Line) -> None:
        """Annotate the matches on line idx, selected match first."""

        result: List[Annotation] = []

        if self.matched_word:
            self._highlight_selected_match(idx, line, result)
            self._highlight_matched_words(line, result)

        self._highlights[idx] = result

    def get_annotations(self, idx: int) -> Optional[List[Annotation]]:
        if idx not in self._highlights:
            return None

        return list(self._highlights[idx])
