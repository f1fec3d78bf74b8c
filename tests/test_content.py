from __future__ import annotations

import pytest

from boxlayout import content
from boxlayout.alignment import Alignment


@pytest.mark.parametrize(
    ("align", "width", "text", "expected"),
    [
        (Alignment.CENTER1, 5, "ab", "  ab "),
        (Alignment.CENTER2, 5, "ab", " ab  "),
        (Alignment.FIRST, 4, "ab", "ab  "),
        (Alignment.LAST, 4, "ab", "  ab"),
        (Alignment.CENTER1, 4, "a", " a  "),
        (Alignment.CENTER2, 4, "a", "  a "),
    ],
)
def test_justify_pads_per_alignment(align: Alignment, width: int, text: str, expected: str) -> None:
    assert content.justify(align, " ", width, text) == expected


@pytest.mark.parametrize(
    ("align", "width", "text", "expected"),
    [
        (Alignment.FIRST, 2, "abcd", "ab"),
        (Alignment.LAST, 2, "abcd", "cd"),
        (Alignment.CENTER1, 2, "abcd", "bc"),
        (Alignment.CENTER1, 3, "abcde", "bcd"),
    ],
)
def test_justify_crops_per_alignment(align: Alignment, width: int, text: str, expected: str) -> None:
    assert content.justify(align, " ", width, text) == expected


def test_justify_uses_pad_character() -> None:
    assert content.justify(Alignment.LAST, ".", 5, "ab") == "...ab"


@pytest.mark.parametrize("width", [0, -3])
def test_justify_non_positive_width_is_empty(width: int) -> None:
    assert content.justify(Alignment.CENTER2, " ", width, "abc") == ""


@pytest.mark.parametrize("align", list(Alignment))
def test_justify_of_fitting_text_is_identity(align: Alignment) -> None:
    assert content.justify(align, " ", 3, "a c") == "a c"


def test_take_never_pads() -> None:
    assert content.take(2, "abc") == "ab"
    assert content.take(5, "abc") == "abc"
    assert content.take(-1, "abc") == ""


def test_words_split_on_whitespace_runs() -> None:
    assert content.words("  a \t bb\nccc  ") == ["a", "bb", "ccc"]
    assert content.words("   ") == []


def test_unwords_and_unlines() -> None:
    assert content.unwords(["a", "b"]) == "a b"
    assert content.unlines(["a", "b"]) == "a\nb\n"
    assert content.unlines([]) == ""


def test_blanks_and_singleton() -> None:
    assert content.blanks(3) == "   "
    assert content.blanks(0) == ""
    assert content.singleton("x") == "x"
    with pytest.raises(ValueError):
        content.singleton("xy")
