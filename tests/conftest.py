import curses
from typing import List, Tuple

import pytest

from linepad.highlight import RustSyntaxHighlighter


class FakeWindow:
    """Stand-in for a curses window that records what is drawn."""

    def __init__(self, height: int = 5, width: int = 20) -> None:
        self.height = height
        self.width = width
        self.calls: List[Tuple[int, int, str, int]] = []
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self) -> Tuple[int, int]:
        return self.height, self.width

    def addstr(self, y: int, x: int, string: str, attr: int = 0) -> None:
        self.calls.append((y, x, string, attr))

    def erase(self) -> None:
        self.erased += 1
        self.calls.clear()

    def noutrefresh(self) -> None:
        self.refreshed += 1

    def row_text(self, y: int) -> str:
        return ''.join(string for row, _, string, _ in self.calls if row == y)


@pytest.fixture
def fake_window() -> FakeWindow:
    return FakeWindow()


@pytest.fixture
def fake_color_pairs(monkeypatch: pytest.MonkeyPatch) -> None:
    # color_pair needs an initialized screen, encode the pair number instead
    monkeypatch.setattr(curses, "color_pair", lambda pair: pair << 8)


@pytest.fixture
def rust_highlighter() -> RustSyntaxHighlighter:
    return RustSyntaxHighlighter()
