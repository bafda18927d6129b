from __future__ import annotations

import pytest

from emoji_sort.sorter import Algorithm


def test_next_walks_the_demo_cycle_and_wraps() -> None:
    seen = [Algorithm.BUBBLE_SORT]
    for _ in range(5):
        seen.append(seen[-1].next())

    assert seen == [
        Algorithm.BUBBLE_SORT,
        Algorithm.INSERTION_SORT,
        Algorithm.SELECTION_SORT,
        Algorithm.MERGE_SORT,
        Algorithm.STUPID_SORT,
        Algorithm.BUBBLE_SORT,
    ]


def test_every_algorithm_has_a_display_name() -> None:
    assert [a.description for a in Algorithm] == [
        "Bubble Sort",
        "Insertion Sort",
        "Selection Sort",
        "Merge Sort",
        "Stupid Sort",
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("merge-sort", Algorithm.MERGE_SORT),
        ("Merge Sort", Algorithm.MERGE_SORT),
        ("BUBBLE_SORT", Algorithm.BUBBLE_SORT),
        ("  stupid-sort ", Algorithm.STUPID_SORT),
    ],
)
def test_parse_accepts_values_and_display_names(text: str, expected: Algorithm) -> None:
    assert Algorithm.parse(text) is expected


def test_parse_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        Algorithm.parse("bogo-sort")
