"""
Annotated string module: a text copy plus range annotations that stay
consistent while the text is spliced.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .annotation import Annotation, AnnotationType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotatedStringPart:
    """A run of text carrying at most one annotation type."""
    string: str
    annotation_type: Optional[AnnotationType] = None


class AnnotatedStringIterator:
    """
    Walks an annotated string as gap-free, non-overlapping parts.

    The iterator works on a snapshot of the text and annotations taken when
    it was created, so later edits of the source string do not affect it.
    """

    def __init__(self, string: str, annotations: Tuple[Annotation, ...]) -> None:
        self.string = string
        self.annotations = annotations
        self.current_idx = 0

    def __iter__(self) -> 'AnnotatedStringIterator':
        return self

    def __next__(self) -> AnnotatedStringPart:
        if self.current_idx >= len(self.string):
            raise StopIteration

        current_idx = self.current_idx

        # The first registered annotation covering the position wins.
        for annotation in self.annotations:
            if annotation.start <= current_idx < annotation.end:
                end_idx = min(annotation.end, len(self.string))
                self.current_idx = end_idx

                return AnnotatedStringPart(
                    self.string[current_idx:end_idx],
                    annotation.annotation_type
                )

        end_idx = min(
            (annotation.start for annotation in self.annotations
             if annotation.start > current_idx),
            default=len(self.string)
        )
        end_idx = min(end_idx, len(self.string))
        self.current_idx = end_idx

        return AnnotatedStringPart(self.string[current_idx:end_idx])


class AnnotatedString:
    """Text with a list of annotations that are repaired on every splice."""

    def __init__(self, string: str = '') -> None:
        self.string = string
        self.annotations: List[Annotation] = []

    def add_annotation(self, annotation_type: AnnotationType, start: int, end: int) -> None:
        """Register an annotation. Earlier registrations take priority when iterating."""

        assert start <= end, f"Inverted annotation range {start}..{end}"

        if start > end:
            logger.warning("Ignoring inverted annotation range %d..%d", start, end)
            return

        self.annotations.append(Annotation(annotation_type, start, end))

    def truncate_left_until(self, until: int) -> None:
        """Remove the text in [0, until)."""

        self.replace(0, until, '')

    def truncate_right_from(self, from_idx: int) -> None:
        """Remove the text in [from_idx, end of text)."""

        self.replace(from_idx, len(self.string), '')

    def replace(self, start: int, end: int, new_string: str) -> None:
        """
        Splice new_string into [start, end) and repair every annotation.

        Bounds at or after the replaced range move with the text. Bounds
        inside the replaced range are shifted but kept within it. Annotations
        that end up empty or start past the end of the text are dropped.

        Args:
            start: First offset to replace
            end: Offset after the last replaced character, clamped to the text length
            new_string: Replacement text
        """

        end = min(end, len(self.string))

        assert start <= end, f"Inverted replace range {start}..{end}"

        if start > end:
            logger.warning("Ignoring replace with inverted range %d..%d", start, end)
            return

        self.string = self.string[:start] + new_string + self.string[end:]

        replaced_range_len = end - start
        shortened = len(new_string) < replaced_range_len
        len_difference = abs(len(new_string) - replaced_range_len)

        def adjust(idx: int) -> int:
            if idx >= end:
                if shortened:
                    return max(0, idx - len_difference)
                return idx + len_difference

            if idx > start:
                if shortened:
                    return max(start, idx - len_difference)
                return min(end, idx + len_difference)

            return idx

        if len_difference:
            for annotation in self.annotations:
                annotation.start = adjust(annotation.start)
                annotation.end = adjust(annotation.end)

        self.annotations = [
            annotation for annotation in self.annotations
            if annotation.start < annotation.end and annotation.start <= len(self.string)
        ]

    def __iter__(self) -> Iterator[AnnotatedStringPart]:
        snapshot = tuple(
            Annotation(annotation.annotation_type, annotation.start, annotation.end)
            for annotation in self.annotations
        )
        return AnnotatedStringIterator(self.string, snapshot)

    def __str__(self) -> str:
        return self.string

    def __len__(self) -> int:
        return len(self.string)
