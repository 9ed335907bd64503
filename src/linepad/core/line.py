"""
Line module: one line of text split into grapheme fragments.

Three coordinate spaces meet here. Text offsets index the Python string,
grapheme indices count user-perceived characters, and columns count the
cells a line occupies on screen once wide characters and replacement
glyphs are taken into account.
"""

import logging
import unicodedata
from dataclasses import dataclass
from enum import IntEnum
from typing import Final, List, Optional, Sequence, Tuple

import grapheme
from wcwidth import wcswidth, wcwidth

from .annotated_string import AnnotatedString
from .annotation import Annotation

logger = logging.getLogger(__name__)

TAB_REPLACEMENT: Final[str] = ' '
WHITESPACE_REPLACEMENT: Final[str] = '␣'
CONTROL_REPLACEMENT: Final[str] = '▯'
ZERO_WIDTH_REPLACEMENT: Final[str] = '·'
ELLIPSIS: Final[str] = '⋯'


class GraphemeWidth(IntEnum):
    """Number of columns a grapheme occupies when rendered."""

    HALF = 1
    FULL = 2


@dataclass(frozen=True)
class TextFragment:
    """A single grapheme cluster of a line and how it is rendered."""
    grapheme: str
    rendered_width: GraphemeWidth
    replacement: Optional[str]
    start: int

    @property
    def end(self) -> int:
        """Text offset just past the cluster."""

        return self.start + len(self.grapheme)


def display_width(cluster: str) -> int:
    """
    Get the number of terminal columns a cluster occupies.

    Non-printable code points count as zero columns instead of making the
    whole cluster unmeasurable.
    """

    width = wcswidth(cluster)
    if width >= 0:
        return width

    return sum(max(0, wcwidth(char)) for char in cluster)


def get_replacement_character(cluster: str) -> Optional[str]:
    """Get the glyph shown in place of a cluster, or None if it is shown as is."""

    width = display_width(cluster)

    if cluster == ' ':
        return None

    if cluster == '\t':
        return TAB_REPLACEMENT

    if width > 0 and not cluster.strip():
        return WHITESPACE_REPLACEMENT

    if width == 0:
        if len(cluster) == 1 and unicodedata.category(cluster) == 'Cc':
            return CONTROL_REPLACEMENT

        return ZERO_WIDTH_REPLACEMENT

    return None


def str_to_fragments(line_str: str) -> List[TextFragment]:
    """Split a string into grapheme fragments with their widths and replacements."""

    fragments = []
    offset = 0

    for cluster in grapheme.graphemes(line_str):
        replacement = get_replacement_character(cluster)

        if replacement is not None:
            rendered_width = GraphemeWidth.HALF
        elif display_width(cluster) <= 1:
            rendered_width = GraphemeWidth.HALF
        else:
            rendered_width = GraphemeWidth.FULL

        fragments.append(TextFragment(cluster, rendered_width, replacement, offset))
        offset += len(cluster)

    return fragments


class Line:
    """A single line of text and its grapheme fragment table."""

    def __init__(self, line_str: str = '') -> None:
        assert '\n' not in line_str, "A line cannot contain a line terminator"

        self._string = line_str
        self._fragments = str_to_fragments(line_str)

    @classmethod
    def from_str(cls, line_str: str) -> 'Line':
        """Create a line from a string without line terminators."""

        return cls(line_str)

    @property
    def text(self) -> str:
        """The raw text of the line."""

        return self._string

    @property
    def fragments(self) -> Sequence[TextFragment]:
        """Read-only view of the fragment table."""

        return tuple(self._fragments)

    def _rebuild_fragments(self) -> None:
        self._fragments = str_to_fragments(self._string)

    def _clamp_grapheme_idx(self, at: int, operation: str) -> int:
        assert 0 <= at <= self.grapheme_count(), (
            f"{operation}: grapheme index {at} out of range 0..{self.grapheme_count()}"
        )

        if 0 <= at <= self.grapheme_count():
            return at

        logger.warning(
            "%s: clamping grapheme index %d to 0..%d", operation, at, self.grapheme_count()
        )
        return max(0, min(at, self.grapheme_count()))

    def get_visible_graphemes(self, column_range: range) -> str:
        """Get the text visible in the given column range, with replacement glyphs."""

        return str(self.get_annotated_visible_substr(column_range))

    def get_annotated_visible_substr(
            self,
            column_range: range,
            annotations: Optional[Sequence[Annotation]] = None) -> AnnotatedString:
        """
        Build the annotated view of the line for a window of columns.

        Column indices differ from grapheme indices because a grapheme can be
        two columns wide. Fragments cut by the window edges are replaced with
        an ellipsis.

        Args:
            column_range: The visible columns, start inclusive and stop exclusive
            annotations: Annotations to apply, in text offsets of this line

        Returns:
            The annotated visible part of the line
        """

        if column_range.start >= column_range.stop:
            return AnnotatedString()

        result = AnnotatedString(self._string)

        for annotation in annotations or ():
            result.add_annotation(annotation.annotation_type, annotation.start, annotation.end)

        # Walk backwards so replacements never move offsets still to be visited.
        fragment_start = self.width()
        for fragment in reversed(self._fragments):
            fragment_end = fragment_start
            fragment_start = max(0, fragment_start - fragment.rendered_width)

            if fragment_start > column_range.stop:
                continue

            if fragment_start < column_range.stop < fragment_end:
                result.replace(fragment.start, len(self._string), ELLIPSIS)
                continue

            if fragment_start == column_range.stop:
                result.truncate_right_from(fragment.start)
                continue

            if fragment_end <= column_range.start:
                result.truncate_left_until(fragment.end)
                break

            if fragment_start < column_range.start < fragment_end:
                result.replace(0, fragment.end, ELLIPSIS)
                break

            if fragment.replacement is not None:
                result.replace(fragment.start, fragment.end, fragment.replacement)

        return result

    def grapheme_count(self) -> int:
        """Get the number of grapheme clusters in the line."""

        return len(self._fragments)

    def width_until(self, grapheme_idx: int) -> int:
        """Get the number of columns taken by the first grapheme_idx graphemes."""

        return sum(fragment.rendered_width for fragment in self._fragments[:max(0, grapheme_idx)])

    def width(self) -> int:
        """Get the number of columns taken by the whole line."""

        return self.width_until(self.grapheme_count())

    def insert_char(self, character: str, at: int) -> None:
        """Insert text before grapheme at, or append it if at equals the grapheme count."""

        assert '\n' not in character, "A line cannot contain a line terminator"
        at = self._clamp_grapheme_idx(at, 'insert_char')

        if at < self.grapheme_count():
            offset = self._fragments[at].start
            self._string = self._string[:offset] + character + self._string[offset:]
        else:
            self._string += character

        self._rebuild_fragments()

    def append_char(self, character: str) -> None:
        """Append text at the end of the line."""

        self.insert_char(character, self.grapheme_count())

    def delete(self, at: int) -> None:
        """Remove grapheme at. Deleting at the end of the line does nothing."""

        at = self._clamp_grapheme_idx(at, 'delete')
        if at >= self.grapheme_count():
            return

        fragment = self._fragments[at]
        self._string = self._string[:fragment.start] + self._string[fragment.end:]
        self._rebuild_fragments()

    def delete_last(self) -> None:
        """Remove the last grapheme of the line, if any."""

        if self.grapheme_count() == 0:
            return

        self.delete(self.grapheme_count() - 1)

    def append(self, other: 'Line') -> None:
        """Append another line's text to this one."""

        self._string += other.text
        self._rebuild_fragments()

    def split(self, at: int) -> 'Line':
        """
        Split the line before grapheme at.

        This line keeps the text before the split point and the remainder is
        returned as a new line. Splitting at or past the end returns an empty
        line and leaves this one unchanged.
        """

        if not 0 <= at < self.grapheme_count():
            return Line()

        offset = self._fragments[at].start
        remainder = self._string[offset:]
        self._string = self._string[:offset]
        self._rebuild_fragments()

        return Line(remainder)

    def text_offset_to_grapheme_idx(self, text_offset: int) -> Optional[int]:
        """Get the index of the first grapheme starting at or after text_offset."""

        if text_offset > len(self._string):
            return None

        for idx, fragment in enumerate(self._fragments):
            if fragment.start >= text_offset:
                return idx

        return None

    def grapheme_idx_to_text_offset(self, grapheme_idx: int) -> int:
        """Get the text offset at which grapheme grapheme_idx starts."""

        grapheme_idx = self._clamp_grapheme_idx(grapheme_idx, 'grapheme_idx_to_text_offset')

        if grapheme_idx == self.grapheme_count():
            return len(self._string)

        return self._fragments[grapheme_idx].start

    def search_forward(self, query: str, from_grapheme_idx: int) -> Optional[int]:
        """Find the first match of query starting at or after from_grapheme_idx."""

        from_grapheme_idx = self._clamp_grapheme_idx(from_grapheme_idx, 'search_forward')
        if from_grapheme_idx == self.grapheme_count():
            return None

        start = self.grapheme_idx_to_text_offset(from_grapheme_idx)
        matches = self.find_all(query, range(start, len(self._string)))

        if not matches:
            return None

        return matches[0][1]

    def search_backward(self, query: str, from_grapheme_idx: int) -> Optional[int]:
        """Find the last match of query that lies entirely before from_grapheme_idx."""

        from_grapheme_idx = self._clamp_grapheme_idx(from_grapheme_idx, 'search_backward')
        if from_grapheme_idx == 0:
            return None

        end = self.grapheme_idx_to_text_offset(from_grapheme_idx)
        matches = self.find_all(query, range(0, end))

        if not matches:
            return None

        return matches[-1][1]

    def find_all(self, query: str, text_range: range) -> List[Tuple[int, int]]:
        """
        Find every occurrence of query inside text_range.

        Only occurrences that begin on a grapheme boundary and cover whole
        graphemes count, so a query never matches part of a cluster.

        Args:
            query: The text to search for
            text_range: Text offsets to search in, stop clamped to the line length

        Returns:
            A list of (text offset, grapheme index) pairs in ascending order
        """

        start = text_range.start
        end = min(text_range.stop, len(self._string))

        assert start <= end, f"Inverted search range {start}..{end}"

        if not query or start > end:
            return []

        potential_matches = []
        position = self._string.find(query, start, end)
        while position != -1:
            potential_matches.append(position)
            position = self._string.find(query, position + len(query), end)

        return self._match_grapheme_clusters(potential_matches, query)

    def _match_grapheme_clusters(self, matches: List[int], query: str) -> List[Tuple[int, int]]:
        query_length = grapheme.length(query)
        result = []

        for start in matches:
            grapheme_idx = self.text_offset_to_grapheme_idx(start)
            if grapheme_idx is None or self._fragments[grapheme_idx].start != start:
                continue

            covered = self._fragments[grapheme_idx:grapheme_idx + query_length]
            if len(covered) != query_length:
                continue

            if ''.join(fragment.grapheme for fragment in covered) == query:
                result.append((start, grapheme_idx))

        return result

    def __str__(self) -> str:
        return self._string

    def __repr__(self) -> str:
        return f"Line({self._string!r})"

    def __len__(self) -> int:
        return len(self._string)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented

        return self._string == other._string
