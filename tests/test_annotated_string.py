import pytest

from linepad.core.annotated_string import AnnotatedString, AnnotatedStringPart
from linepad.core.annotation import Annotation, AnnotationType


def spans(annotated: AnnotatedString):
    return [(a.start, a.end) for a in annotated.annotations]


def parts(annotated: AnnotatedString):
    return [(part.string, part.annotation_type) for part in annotated]


def test_growing_splice_shifts_following_annotations() -> None:
    annotated = AnnotatedString("ab")
    annotated.add_annotation(AnnotationType.KEYWORD, 2, 4)

    annotated.replace(2, 2, "XY")

    assert str(annotated) == "abXY"
    assert spans(annotated) == [(4, 6)]


def test_shrinking_splice_shifts_following_annotations() -> None:
    annotated = AnnotatedString("hello world")
    annotated.add_annotation(AnnotationType.STRING, 6, 11)

    annotated.replace(0, 6, "")

    assert str(annotated) == "world"
    assert spans(annotated) == [(0, 5)]


def test_bounds_inside_a_shrinking_splice_are_clamped_to_its_start() -> None:
    annotated = AnnotatedString("abcdef")
    annotated.add_annotation(AnnotationType.NUMBER, 2, 5)

    annotated.replace(1, 4, "X")

    assert str(annotated) == "aXef"
    assert spans(annotated) == [(1, 3)]


def test_bounds_inside_a_growing_splice_stay_inside_it() -> None:
    annotated = AnnotatedString("abcdef")
    annotated.add_annotation(AnnotationType.NUMBER, 2, 3)

    annotated.replace(1, 4, "WXYZ")

    assert str(annotated) == "aWXYZef"
    assert spans(annotated) == [(3, 4)]


def test_collapsed_annotations_are_dropped() -> None:
    annotated = AnnotatedString("abc")
    annotated.add_annotation(AnnotationType.COMMENT, 1, 2)

    annotated.replace(0, 3, "")

    assert str(annotated) == ""
    assert annotated.annotations == []


def test_annotations_before_the_splice_are_untouched() -> None:
    annotated = AnnotatedString("let value")
    annotated.add_annotation(AnnotationType.KEYWORD, 0, 3)

    annotated.replace(4, 9, "x")

    assert str(annotated) == "let x"
    assert spans(annotated) == [(0, 3)]


def test_replace_clamps_end_to_text_length() -> None:
    annotated = AnnotatedString("abc")

    annotated.replace(1, 100, "Z")

    assert str(annotated) == "aZ"


def test_inverted_replace_is_a_contract_violation() -> None:
    annotated = AnnotatedString("abc")

    with pytest.raises(AssertionError):
        annotated.replace(2, 1, "")


def test_inverted_annotation_is_a_contract_violation() -> None:
    with pytest.raises(AssertionError):
        AnnotatedString("abc").add_annotation(AnnotationType.TYPE, 2, 1)


def test_truncate_left_and_right() -> None:
    annotated = AnnotatedString("abcdef")
    annotated.add_annotation(AnnotationType.TYPE, 1, 5)

    annotated.truncate_left_until(2)
    assert str(annotated) == "cdef"
    assert spans(annotated) == [(0, 3)]

    annotated.truncate_right_from(2)
    assert str(annotated) == "cd"
    assert spans(annotated) == [(0, 2)]


def test_splices_keep_annotations_within_the_text() -> None:
    annotated = AnnotatedString("fn main() { let x = 42; }")
    annotated.add_annotation(AnnotationType.KEYWORD, 0, 2)
    annotated.add_annotation(AnnotationType.KEYWORD, 12, 15)
    annotated.add_annotation(AnnotationType.NUMBER, 20, 22)

    for start, end, replacement in [(3, 7, "run"), (0, 2, ""), (10, 14, "const"), (0, 0, "  ")]:
        annotated.replace(start, end, replacement)
        for annotation in annotated.annotations:
            assert annotation.start < annotation.end <= len(annotated)


def test_iteration_covers_text_without_gaps() -> None:
    annotated = AnnotatedString("abcdef")
    annotated.add_annotation(AnnotationType.STRING, 2, 4)

    assert parts(annotated) == [
        ("ab", None),
        ("cd", AnnotationType.STRING),
        ("ef", None),
    ]


def test_first_registered_annotation_wins() -> None:
    annotated = AnnotatedString("abcdef")
    annotated.add_annotation(AnnotationType.SELECTED_MATCH, 0, 3)
    annotated.add_annotation(AnnotationType.KEYWORD, 0, 6)

    assert parts(annotated) == [
        ("abc", AnnotationType.SELECTED_MATCH),
        ("def", AnnotationType.KEYWORD),
    ]

    reversed_order = AnnotatedString("abcdef")
    reversed_order.add_annotation(AnnotationType.KEYWORD, 0, 6)
    reversed_order.add_annotation(AnnotationType.SELECTED_MATCH, 0, 3)

    assert parts(reversed_order) == [("abcdef", AnnotationType.KEYWORD)]


def test_annotation_past_the_end_is_clipped() -> None:
    annotated = AnnotatedString("abc")
    annotated.add_annotation(AnnotationType.COMMENT, 1, 10)

    assert parts(annotated) == [("a", None), ("bc", AnnotationType.COMMENT)]


def test_iteration_uses_a_snapshot() -> None:
    annotated = AnnotatedString("abc")
    annotated.add_annotation(AnnotationType.KEYWORD, 0, 1)
    iterator = iter(annotated)

    annotated.replace(0, 3, "")

    assert list(iterator) == [
        AnnotatedStringPart("a", AnnotationType.KEYWORD),
        AnnotatedStringPart("bc", None),
    ]


def test_empty_string_yields_no_parts() -> None:
    assert list(AnnotatedString()) == []


def test_annotation_shift() -> None:
    annotation = Annotation(AnnotationType.CHAR, 0, 3)
    annotation.shift(5)

    assert (annotation.start, annotation.end) == (5, 8)
