"""
Syntax highlighting for Rust source files.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, FrozenSet, List, Optional, Tuple

from ..core.annotation import Annotation, AnnotationType
from ..core.line import Line
from ..utils.words import first_words, iter_word_bound_indices
from .base import SyntaxHighlighter

logger = logging.getLogger(__name__)

KEYWORDS: Final[FrozenSet[str]] = frozenset({
    'break', 'const', 'continue', 'crate', 'else', 'enum', 'extern', 'false',
    'fn', 'for', 'if', 'impl', 'in', 'let', 'loop', 'match', 'mod', 'move',
    'mut', 'pub', 'ref', 'return', 'self', 'Self', 'static', 'struct', 'super',
    'trait', 'true', 'type', 'unsafe', 'use', 'where', 'while', 'async',
    'await', 'dyn', 'abstract', 'become', 'box', 'do', 'final', 'macro',
    'override', 'priv', 'typeof', 'unsized', 'virtual', 'yield', 'try',
    'macro_rules', 'union',
})

TYPES: Final[FrozenSet[str]] = frozenset({
    'i8', 'i16', 'i32', 'i64', 'i128', 'isize', 'u8', 'u16', 'u32', 'u64',
    'u128', 'usize', 'f32', 'f64', 'bool', 'char', 'Option', 'Result',
    'String', 'str', 'Vec', 'HashMap',
})

KNOWN_VALUES: Final[FrozenSet[str]] = frozenset({
    'Some', 'None', 'true', 'false', 'Ok', 'Err',
})

BLOCK_COMMENT_OPEN: Final[str] = '/*'
BLOCK_COMMENT_CLOSE: Final[str] = '*/'
LINE_COMMENT: Final[str] = '//'

BASE_DIGITS: Final[dict] = {
    'b': frozenset('01'),
    'o': frozenset('01234567'),
    'x': frozenset('0123456789abcdefABCDEF'),
}


class LexicalMode(Enum):
    """What a line starts inside of."""

    NORMAL = 'normal'
    IN_BLOCK_COMMENT = 'in_block_comment'
    IN_STRING = 'in_string'


@dataclass(frozen=True)
class HighlightState:
    """Lexical state carried from the end of one line to the start of the next."""
    comment_depth: int = 0
    in_string: bool = False

    @property
    def mode(self) -> LexicalMode:
        if self.in_string:
            return LexicalMode.IN_STRING

        if self.comment_depth > 0:
            return LexicalMode.IN_BLOCK_COMMENT

        return LexicalMode.NORMAL


def is_numeric_literal(word: str) -> bool:
    """Check for a prefixed literal such as 0b1010, 0o17 or 0xFF."""

    if len(word) < 3 or word[0] != '0':
        return False

    digits = BASE_DIGITS.get(word[1].lower())
    if digits is None:
        return False

    return all(char in digits for char in word[2:])


def is_valid_number(word: str) -> bool:
    """Check whether a word is an integer, float or prefixed numeric literal."""

    if not word:
        return False

    if is_numeric_literal(word):
        return True

    if not word[0].isascii() or not word[0].isdigit():
        return False

    seen_dot = False
    seen_e = False
    prev_was_digit = True

    for char in word[1:]:
        if char.isascii() and char.isdigit():
            prev_was_digit = True
        elif char == '_':
            if not prev_was_digit:
                return False
            prev_was_digit = False
        elif char == '.':
            if seen_dot or seen_e or not prev_was_digit:
                return False
            seen_dot = True
            prev_was_digit = False
        elif char in 'eE':
            if seen_e or not prev_was_digit:
                return False
            seen_e = True
            prev_was_digit = False
        else:
            return False

    return prev_was_digit


def annotate_block_comment(text: str, depth: int) -> Tuple[Optional[Annotation], int]:
    """
    Annotate a block comment starting at the beginning of text.

    With depth 0 the text must open a comment. Nested comments are tracked,
    and the annotation ends where the depth returns to 0 or at the end of the
    text if the comment stays open.

    Returns:
        The annotation (or None) and the comment depth after it
    """

    if depth == 0 and not text.startswith(BLOCK_COMMENT_OPEN):
        return None, 0

    idx = 0
    while idx < len(text):
        if text.startswith(BLOCK_COMMENT_OPEN, idx):
            depth += 1
            idx += len(BLOCK_COMMENT_OPEN)
        elif text.startswith(BLOCK_COMMENT_CLOSE, idx):
            depth -= 1
            idx += len(BLOCK_COMMENT_CLOSE)
            if depth == 0:
                return Annotation(AnnotationType.COMMENT, 0, idx), 0
        else:
            idx += 1

    return Annotation(AnnotationType.COMMENT, 0, len(text)), depth


def annotate_string(text: str, in_string: bool) -> Tuple[Optional[Annotation], bool]:
    """
    Annotate a string literal starting at the beginning of text.

    Outside a string the text must start with a double quote. The annotation
    ends after the first unescaped closing quote or at the end of the text.

    Returns:
        The annotation (or None) and whether a string is still open after it
    """

    if in_string:
        idx = 0
    elif text.startswith('"'):
        idx = 1
    else:
        return None, False

    while idx < len(text):
        char = text[idx]
        if char == '\\':
            idx += 2
            continue

        if char == '"':
            return Annotation(AnnotationType.STRING, 0, idx + 1), False

        idx += 1

    return Annotation(AnnotationType.STRING, 0, len(text)), True


def annotate_single_line_comment(text: str) -> Optional[Annotation]:
    if text.startswith(LINE_COMMENT):
        return Annotation(AnnotationType.COMMENT, 0, len(text))

    return None


def annotate_char(text: str) -> Optional[Annotation]:
    """Annotate a character literal such as 'a' or '\\n'."""

    words = first_words(text, 4)
    if not words or words[0][1] != "'":
        return None

    position = 1
    if len(words) > position and words[position][1] == '\\':
        position += 1

    # Skip the character itself.
    position += 1

    if len(words) > position and words[position][1] == "'":
        return Annotation(AnnotationType.CHAR, 0, words[position][0] + 1)

    return None


def annotate_lifetime_specifier(text: str) -> Optional[Annotation]:
    words = first_words(text, 2)
    if len(words) < 2 or words[0][1] != "'":
        return None

    idx, next_word = words[1]
    return Annotation(AnnotationType.LIFETIME_SPECIFIER, 0, idx + len(next_word))


def annotate_next_word(
        text: str,
        annotation_type: AnnotationType,
        validator: Callable[[str], bool]) -> Optional[Annotation]:
    """Annotate the first word of text if validator accepts it."""

    words = first_words(text, 1)
    if words and validator(words[0][1]):
        return Annotation(annotation_type, 0, len(words[0][1]))

    return None


def annotate_number(text: str) -> Optional[Annotation]:
    return annotate_next_word(text, AnnotationType.NUMBER, is_valid_number)


def annotate_keyword(text: str) -> Optional[Annotation]:
    return annotate_next_word(text, AnnotationType.KEYWORD, KEYWORDS.__contains__)


def annotate_type(text: str) -> Optional[Annotation]:
    return annotate_next_word(text, AnnotationType.TYPE, TYPES.__contains__)


def annotate_known_value(text: str) -> Optional[Annotation]:
    return annotate_next_word(text, AnnotationType.KNOWN_VALUE, KNOWN_VALUES.__contains__)


SINGLE_LINE_MATCHERS: Final[Tuple[Callable[[str], Optional[Annotation]], ...]] = (
    annotate_single_line_comment,
    annotate_char,
    annotate_lifetime_specifier,
    annotate_number,
    annotate_keyword,
    annotate_type,
    annotate_known_value,
)


def annotate_remainder(text: str, state: HighlightState) -> Tuple[Optional[Annotation], HighlightState]:
    """Try every matcher, in priority order, on the text following a word boundary."""

    annotation, depth = annotate_block_comment(text, 0)
    if annotation is not None:
        return annotation, HighlightState(comment_depth=depth)

    annotation, in_string = annotate_string(text, False)
    if annotation is not None:
        return annotation, HighlightState(in_string=in_string)

    for matcher in SINGLE_LINE_MATCHERS:
        annotation = matcher(text)
        if annotation is not None:
            return annotation, state

    return None, state


def scan_line(text: str, state: HighlightState) -> Tuple[List[Annotation], HighlightState]:
    """
    Annotate one line given the state left behind by the previous line.

    Args:
        text: The line text
        state: The lexical state at the start of the line

    Returns:
        The annotations of the line and the state at its end
    """

    result: List[Annotation] = []
    consumed = 0

    if state.mode is LexicalMode.IN_STRING:
        annotation, in_string = annotate_string(text, True)
        state = HighlightState(in_string=in_string)
    elif state.mode is LexicalMode.IN_BLOCK_COMMENT:
        annotation, depth = annotate_block_comment(text, state.comment_depth)
        state = HighlightState(comment_depth=depth)
    else:
        annotation = None

    if annotation is not None:
        result.append(annotation)
        consumed = annotation.end

    for start_idx, _ in iter_word_bound_indices(text):
        if start_idx < consumed:
            continue

        annotation, state = annotate_remainder(text[start_idx:], state)
        if annotation is None:
            continue

        annotation.shift(start_idx)
        result.append(annotation)
        consumed = annotation.end

    return result, state


class RustSyntaxHighlighter(SyntaxHighlighter):
    """Highlights keywords, types, literals and comments of Rust code."""

    def __init__(self) -> None:
        self._highlights: List[List[Annotation]] = []
        self._line_states: List[HighlightState] = []
        self._state = HighlightState()

    @property
    def state(self) -> HighlightState:
        """The lexical state after the last scanned line."""

        return self._state

    def highlight(self, idx: int, line: Line) -> None:
        """
        Scan line idx.

        Rescanning an already scanned line drops the cached results from that
        line on and restarts from the state recorded for it.
        """

        assert idx <= len(self._highlights), (
            f"Line {idx} highlighted before line {len(self._highlights)}"
        )

        if idx > len(self._highlights):
            logger.warning(
                "Skipping line %d: lines from %d on were not highlighted yet",
                idx, len(self._highlights)
            )
            return

        if idx < len(self._highlights):
            logger.debug("Rescanning from line %d", idx)
            self._state = self._line_states[idx]
            del self._highlights[idx:]
            del self._line_states[idx:]

        self._line_states.append(self._state)
        annotations, self._state = scan_line(str(line), self._state)
        self._highlights.append(annotations)

    def get_annotations(self, idx: int) -> Optional[List[Annotation]]:
        if not 0 <= idx < len(self._highlights):
            return None

        return list(self._highlights[idx])
