from __future__ import annotations

import pytest

from boxlayout.alignment import (
    Alignment,
    bottom,
    center1,
    center2,
    left,
    num_fwd,
    num_rev,
    parse_alignment,
    right,
    take_p,
    take_pa,
    top,
)


@pytest.mark.parametrize(
    ("align", "n", "rev", "fwd"),
    [
        (Alignment.FIRST, 5, 0, 5),
        (Alignment.LAST, 5, 5, 0),
        (Alignment.CENTER1, 5, 3, 2),
        (Alignment.CENTER2, 5, 2, 3),
        (Alignment.CENTER1, 4, 2, 2),
        (Alignment.CENTER2, 0, 0, 0),
    ],
)
def test_weights_follow_table(align: Alignment, n: int, rev: int, fwd: int) -> None:
    assert num_rev(align, n) == rev
    assert num_fwd(align, n) == fwd


@pytest.mark.parametrize("align", list(Alignment))
def test_weights_always_sum_to_total(align: Alignment) -> None:
    for n in range(0, 13):
        assert num_rev(align, n) + num_fwd(align, n) == n


def test_centered_odd_amounts_differ_by_one() -> None:
    for n in (1, 3, 7, 11):
        assert num_rev(center1, n) - num_fwd(center1, n) == 1
        assert num_fwd(center2, n) - num_rev(center2, n) == 1


def test_aliases_name_the_expected_members() -> None:
    assert top is left is Alignment.FIRST
    assert bottom is right is Alignment.LAST
    assert center1 is Alignment.CENTER1
    assert center2 is Alignment.CENTER2


def test_take_p_pads_and_crops() -> None:
    assert take_p(0, 3, [1]) == [1, 0, 0]
    assert take_p(0, 2, [1, 2, 3]) == [1, 2]
    assert take_p(0, 0, [1]) == []
    assert take_p(0, -4, [1]) == []


def test_take_pa_pads_on_the_aligned_side() -> None:
    assert take_pa(Alignment.FIRST, 0, 3, [1]) == [1, 0, 0]
    assert take_pa(Alignment.LAST, 0, 3, [1]) == [0, 0, 1]
    assert take_pa(Alignment.CENTER1, 0, 4, [1]) == [0, 1, 0, 0]
    assert take_pa(Alignment.CENTER2, 0, 4, [1]) == [0, 0, 1, 0]


def test_take_pa_crops_from_the_opposite_side() -> None:
    items = [1, 2, 3, 4]
    assert take_pa(Alignment.FIRST, 0, 2, items) == [1, 2]
    assert take_pa(Alignment.LAST, 0, 2, items) == [3, 4]
    assert take_pa(Alignment.CENTER1, 0, 2, items) == [2, 3]
    assert take_pa(Alignment.CENTER2, 0, 2, items) == [2, 3]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("first", Alignment.FIRST),
        ("Right", Alignment.LAST),
        (" center ", Alignment.CENTER1),
        ("CENTER2", Alignment.CENTER2),
        ("top", Alignment.FIRST),
        (Alignment.LAST, Alignment.LAST),
    ],
)
def test_parse_alignment_accepts_names_and_aliases(raw: object, expected: Alignment) -> None:
    assert parse_alignment(raw) is expected


def test_parse_alignment_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown alignment"):
        parse_alignment("diagonal")
