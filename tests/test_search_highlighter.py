from linepad.core.annotation import Annotation, AnnotationType
from linepad.core.line import Line
from linepad.core.location import Location
from linepad.highlight.search import SearchResultHighlighter


def test_selected_match_comes_before_other_matches() -> None:
    highlighter = SearchResultHighlighter("ab", Location(0, 2))
    highlighter.highlight(0, Line("abab"))

    assert highlighter.get_annotations(0) == [
        Annotation(AnnotationType.SELECTED_MATCH, 2, 4),
        Annotation(AnnotationType.MATCH, 0, 2),
        Annotation(AnnotationType.MATCH, 2, 4),
    ]


def test_selected_match_only_applies_to_its_line() -> None:
    highlighter = SearchResultHighlighter("ab", Location(0, 2))
    highlighter.highlight(1, Line("xab"))

    assert highlighter.get_annotations(1) == [Annotation(AnnotationType.MATCH, 1, 3)]


def test_matches_are_grapheme_aligned() -> None:
    highlighter = SearchResultHighlighter("e")
    highlighter.highlight(0, Line("e\u0301 e"))

    assert highlighter.get_annotations(0) == [Annotation(AnnotationType.MATCH, 3, 4)]


def test_empty_query_annotates_nothing() -> None:
    highlighter = SearchResultHighlighter("", Location(0, 0))
    highlighter.highlight(0, Line("anything"))

    assert highlighter.get_annotations(0) == []


def test_unhighlighted_line_has_no_annotations() -> None:
    assert SearchResultHighlighter("x").get_annotations(3) is None
