"""
Mapping of annotation types to curses attributes and drawing of annotated text.
"""

import curses
from typing import Dict, Final, Iterable, Optional

from ..core.annotated_string import AnnotatedStringPart
from ..core.annotation import AnnotationType
from ..core.line import display_width

SYNTAX_COLORS: Final[Dict[AnnotationType, int]] = {
    AnnotationType.KEYWORD: 1,             # Cyan
    AnnotationType.STRING: 2,              # Yellow
    AnnotationType.COMMENT: 3,             # Green
    AnnotationType.TYPE: 4,                # Magenta
    AnnotationType.KNOWN_VALUE: 5,         # Blue
    AnnotationType.NUMBER: 6,              # Red
    AnnotationType.CHAR: 2,                # Yellow
    AnnotationType.LIFETIME_SPECIFIER: 4,  # Magenta
    AnnotationType.MATCH: 7,               # Black on yellow
    AnnotationType.SELECTED_MATCH: 8,      # Black on white
}

_colors_initialized = False


def init_colors() -> None:
    """Initialize the color pairs used for annotated text."""

    global _colors_initialized

    if _colors_initialized or not curses.has_colors():
        return

    curses.init_pair(1, curses.COLOR_CYAN, -1)
    curses.init_pair(2, curses.COLOR_YELLOW, -1)
    curses.init_pair(3, curses.COLOR_GREEN, -1)
    curses.init_pair(4, curses.COLOR_MAGENTA, -1)
    curses.init_pair(5, curses.COLOR_BLUE, -1)
    curses.init_pair(6, curses.COLOR_RED, -1)
    curses.init_pair(7, curses.COLOR_BLACK, curses.COLOR_YELLOW)
    curses.init_pair(8, curses.COLOR_BLACK, curses.COLOR_WHITE)

    _colors_initialized = True


def attribute_for(annotation_type: Optional[AnnotationType]) -> int:
    """Get the curses attribute an annotation type is drawn with."""

    if annotation_type is None:
        return curses.color_pair(0)

    attr = curses.color_pair(SYNTAX_COLORS.get(annotation_type, 0))
    if annotation_type is AnnotationType.SELECTED_MATCH:
        attr |= curses.A_BOLD

    return attr


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, ignoring writes outside of it."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


def draw_parts(window: 'curses.window', y: int, x: int, parts: Iterable[AnnotatedStringPart]) -> int:
    """
    Draw annotated parts on one row of a window.

    Args:
        window: The curses window to draw in
        y: Row to draw on
        x: Column to start at
        parts: The parts of an annotated string

    Returns:
        The column after the last drawn part
    """

    for part in parts:
        safe_addstr(window, y, x, part.string, attribute_for(part.annotation_type))
        x += display_width(part.string)

    return x
