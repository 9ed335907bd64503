"""
Word-boundary segmentation used by the syntax highlighters.

This approximates Unicode word segmentation. A '.' only stays inside a word
between digits, so "self.len" is three words here where full Unicode rules
would give one.
"""

import re
from bisect import bisect_left
from typing import Final, Iterator, List, Tuple

import grapheme

# Whitespace runs, identifier/number runs (a '.' between digits stays inside
# the word so "3.14" is one token), or a single other character.
WORD_BOUND_PATTERN: Final[re.Pattern] = re.compile(
    r'\s+'
    r'|\w+(?:(?<=\d)\.(?=\d)\w+)*'
    r'|.',
    re.DOTALL
)


def cluster_boundaries(text: str) -> List[int]:
    """Get the offset after every grapheme cluster of the text."""

    boundaries = []
    offset = 0
    for cluster in grapheme.graphemes(text):
        offset += len(cluster)
        boundaries.append(offset)

    return boundaries


def iter_word_bound_indices(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (offset, word) pairs that together cover the whole text.

    A word never ends inside a grapheme cluster: combining marks and other
    extending characters stay with the word they follow.
    """

    boundaries = cluster_boundaries(text)
    offset = 0

    while offset < len(text):
        end = WORD_BOUND_PATTERN.match(text, offset).end()
        end = boundaries[bisect_left(boundaries, end)]

        yield offset, text[offset:end]
        offset = end


def first_words(text: str, count: int) -> List[Tuple[int, str]]:
    """Get at most the first count (offset, word) pairs of the text."""

    result = []
    for bound in iter_word_bound_indices(text):
        if len(result) == count:
            break
        result.append(bound)

    return result
