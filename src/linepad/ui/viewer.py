"""
Read-only curses viewer that renders lines through the highlighters.
"""

import curses
import logging
from typing import List, Optional

from ..core.filetype import FileType
from ..core.line import Line
from ..core.location import Location
from ..highlight import Highlighter
from .colors import draw_parts, init_colors

logger = logging.getLogger(__name__)


class Viewer:
    """Scrollable view of a list of lines with syntax and search highlighting."""

    def __init__(self, lines: List[Line], file_type: FileType = FileType.TEXT,
                 query: Optional[str] = None) -> None:
        self.lines = lines or [Line()]
        self.file_type = file_type
        self.query = query
        self.selected_match: Optional[Location] = None
        self.top_line = 0
        self.left_column = 0
        self.height = 1

    def render(self, window: 'curses.window') -> None:
        """Draw the visible lines into window."""

        height, width = window.getmaxyx()
        self.height = height
        window.erase()

        # Highlighting restarts at line 0 on every pass.
        highlighter = Highlighter(self.query, self.selected_match, self.file_type)
        highlighter.highlight_lines(self.lines, until=self.top_line + height)

        for row in range(height):
            line_idx = self.top_line + row
            if line_idx >= len(self.lines):
                break

            annotated = self.lines[line_idx].get_annotated_visible_substr(
                range(self.left_column, self.left_column + width),
                highlighter.get_annotations(line_idx)
            )
            draw_parts(window, row, 0, annotated)

        window.noutrefresh()

    def search_next(self, backward: bool = False) -> Optional[Location]:
        """
        Move the selected match to the next (or previous) occurrence of the query.

        The search wraps around the end (or start) of the document.

        Returns:
            The new selected match, or None if the query does not occur at all
        """

        if not self.query:
            return None

        current = self.selected_match or Location(self.top_line, 0)
        line_count = len(self.lines)

        for step in range(line_count + 1):
            if backward:
                line_idx = (current.line_idx - step) % line_count
                line = self.lines[line_idx]
                from_idx = current.grapheme_idx if step == 0 else line.grapheme_count()
                found = line.search_backward(self.query, from_idx)
            else:
                line_idx = (current.line_idx + step) % line_count
                line = self.lines[line_idx]
                from_idx = 0
                if step == 0 and self.selected_match is not None:
                    from_idx = min(current.grapheme_idx + 1, line.grapheme_count())
                found = line.search_forward(self.query, from_idx)

            if found is not None:
                self.selected_match = Location(line_idx, found)
                self.scroll_to(self.selected_match)
                return self.selected_match

        logger.debug("No match for %r", self.query)
        return None

    def scroll_to(self, location: Location) -> None:
        """Scroll vertically so that location is on screen."""

        height = max(1, self.height)
        if location.line_idx < self.top_line:
            self.top_line = location.line_idx
        elif location.line_idx >= self.top_line + height:
            self.top_line = location.line_idx - height + 1

    def handle_input(self, key: int, height: int) -> bool:
        """
        Handle a key press.

        Returns:
            False if the viewer should close
        """

        if key in (ord('q'), 27):
            return False

        if key == curses.KEY_DOWN:
            self.top_line = min(self.top_line + 1, len(self.lines) - 1)
        elif key == curses.KEY_UP:
            self.top_line = max(0, self.top_line - 1)
        elif key == curses.KEY_NPAGE:
            self.top_line = min(self.top_line + height, len(self.lines) - 1)
        elif key == curses.KEY_PPAGE:
            self.top_line = max(0, self.top_line - height)
        elif key == curses.KEY_RIGHT:
            self.left_column += 1
        elif key == curses.KEY_LEFT:
            self.left_column = max(0, self.left_column - 1)
        elif key == ord('n'):
            self.search_next()
        elif key == ord('N'):
            self.search_next(backward=True)

        return True


def run(stdscr: 'curses.window', viewer: Viewer) -> None:
    """Run the viewer's input loop until it is closed."""

    curses.use_default_colors()
    curses.curs_set(0)
    init_colors()

    while True:
        viewer.render(stdscr)
        curses.doupdate()

        try:
            key = stdscr.getch()
        except KeyboardInterrupt:
            break

        height, _ = stdscr.getmaxyx()
        if not viewer.handle_input(key, height):
            break
