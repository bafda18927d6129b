from __future__ import annotations

import pytest

from emoji_sort.replay import ReplayError, replay
from emoji_sort.steps import AlgorithmStep, Intensity, StepType


def test_highlights_do_not_move_anything() -> None:
    steps = [AlgorithmStep.compare_highlight(0, 1, Intensity.LARGE)]
    assert replay(["a", "b"], steps) == ["a", "b"]


def test_hold_slide_unhold_places_the_held_element_in_the_gap() -> None:
    steps = [
        AlgorithmStep.hold(2),
        AlgorithmStep.slide(1, 2),
        AlgorithmStep.slide(0, 1),
        AlgorithmStep.unhold(),
    ]
    assert replay(["b", "c", "a"], steps) == ["a", "b", "c"]


def test_joining_area_collapses_on_merge_complete() -> None:
    steps = [
        AlgorithmStep.move_to_joining_area(1, 0),
        AlgorithmStep.move_to_joining_area(0, 1),
    ]
    # Nothing lands in the array until the merge completes.
    with pytest.raises(ReplayError):
        replay(["y", "x"], steps)

    assert replay(["y", "x"], steps + [AlgorithmStep.merge_complete()]) == ["x", "y"]


@pytest.mark.parametrize(
    "steps",
    [
        [AlgorithmStep.swap(0, 3)],
        [AlgorithmStep.hold(5), AlgorithmStep.unhold()],
        [AlgorithmStep.move_to_joining_area(0, 9), AlgorithmStep.merge_complete()],
    ],
)
def test_out_of_range_indices_are_rejected(steps: list[AlgorithmStep]) -> None:
    with pytest.raises(ReplayError):
        replay([1, 2, 3], steps)


def test_unhold_without_hold_is_rejected() -> None:
    with pytest.raises(ReplayError):
        replay([1, 2], [AlgorithmStep.unhold()])


def test_nested_holds_are_rejected() -> None:
    with pytest.raises(ReplayError):
        replay([1, 2], [AlgorithmStep.hold(0), AlgorithmStep.hold(1)])


def test_trace_ending_with_open_hold_is_rejected() -> None:
    with pytest.raises(ReplayError):
        replay([1, 2], [AlgorithmStep.hold(1)])


def test_wrong_index_count_is_rejected() -> None:
    with pytest.raises(ReplayError):
        replay([1, 2], [AlgorithmStep(StepType.SWAP, (0,))])


def test_describe_is_short_and_readable() -> None:
    assert AlgorithmStep.swap(3, 2).describe() == "SWAP 3<->2"
    assert AlgorithmStep.compare_highlight(1, 0, Intensity.SMALL).describe() == "COMPARE 1?0 (SMALL)"
    assert AlgorithmStep.move_to_joining_area(4, 1).describe() == "JOIN 4->[1]"
    assert AlgorithmStep.unhold().describe() == "UNHOLD"
