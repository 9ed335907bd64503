import curses

from linepad.core.annotation import AnnotationType
from linepad.core.filetype import FileType
from linepad.core.line import Line
from linepad.core.location import Location
from linepad.ui.colors import SYNTAX_COLORS
from linepad.ui.viewer import Viewer


def make_viewer(*texts: str, query=None, file_type=FileType.TEXT) -> Viewer:
    return Viewer([Line(text) for text in texts], file_type, query)


def test_render_draws_visible_lines(fake_window, fake_color_pairs) -> None:
    viewer = make_viewer("/* open", "still */ fn x", "tail", file_type=FileType.RUST)
    viewer.top_line = 1

    viewer.render(fake_window)

    assert fake_window.refreshed == 1
    assert fake_window.row_text(0) == "still */ fn x"
    assert fake_window.row_text(1) == "tail"
    assert (0, 0, "still */", SYNTAX_COLORS[AnnotationType.COMMENT] << 8) in fake_window.calls


def test_render_clips_to_window_width(fake_window, fake_color_pairs) -> None:
    fake_window.width = 5
    viewer = make_viewer("abcdefgh")
    viewer.left_column = 2

    viewer.render(fake_window)

    assert fake_window.row_text(0) == "cdefg"


def test_search_next_wraps_around() -> None:
    viewer = make_viewer("foo", "bar foo", "baz", query="foo")

    assert viewer.search_next() == Location(0, 0)
    assert viewer.search_next() == Location(1, 4)
    assert viewer.search_next() == Location(0, 0)


def test_search_previous_wraps_around() -> None:
    viewer = make_viewer("foo", "bar foo", "baz", query="foo")
    viewer.selected_match = Location(0, 0)

    assert viewer.search_next(backward=True) == Location(1, 4)
    assert viewer.search_next(backward=True) == Location(0, 0)


def test_search_without_matches() -> None:
    viewer = make_viewer("abc", query="zzz")

    assert viewer.search_next() is None
    assert viewer.selected_match is None
    assert make_viewer("abc").search_next() is None


def test_handle_input_scrolls_and_quits() -> None:
    viewer = make_viewer("a", "b", "c")

    assert viewer.handle_input(curses.KEY_DOWN, 2)
    assert viewer.top_line == 1
    assert viewer.handle_input(curses.KEY_NPAGE, 2)
    assert viewer.top_line == 2
    assert viewer.handle_input(curses.KEY_RIGHT, 2)
    assert viewer.left_column == 1
    assert viewer.handle_input(curses.KEY_LEFT, 2)
    assert viewer.handle_input(curses.KEY_LEFT, 2)
    assert viewer.left_column == 0
    assert not viewer.handle_input(ord('q'), 2)
