from __future__ import annotations

import logging
import random
from typing import Sequence, TypeVar

from emoji_sort.errors import MissingTraitError
from emoji_sort.models import Trait, TraitSortable
from emoji_sort.shuffle import shuffle_steps
from emoji_sort.step_sink import StepSink
from emoji_sort.steps import AlgorithmStep, Intensity

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TraitSortable)

STUPID_SORT_PASSES = 6


def _trait_at(work: Sequence[TraitSortable], index: int, trait: Trait, offset: int = 0) -> float:
    value = work[index].trait_value(trait)
    if value is None:
        logger.debug("missing trait %s at position %d", trait.value, offset + index)
        raise MissingTraitError(trait, offset + index)
    return value


def bubble_sort(objects: Sequence[T], trait: Trait, step_sink: StepSink) -> list[T]:
    """
    Adjacent-pair bubble sort.

    Each pass stops at the position of the previous pass's last swap; a pass
    with no swaps ends the sort.
    """
    work = list(objects)
    sorted_above = len(work)
    while sorted_above != 0:
        last_swap = 0
        for i in range(1, sorted_above):
            first = _trait_at(work, i - 1, trait)
            second = _trait_at(work, i, trait)
            step_sink.emit(AlgorithmStep.compare_highlight(i, i - 1, Intensity.SMALL))
            if first > second:
                work[i], work[i - 1] = work[i - 1], work[i]
                last_swap = i
                step_sink.emit(AlgorithmStep.compare_highlight(i, i - 1, Intensity.LARGE))
                step_sink.emit(AlgorithmStep.swap(i, i - 1))
        sorted_above = last_swap
    return work


def insertion_sort(objects: Sequence[T], trait: Trait, step_sink: StepSink) -> list[T]:
    """
    Lift-shift-place insertion sort.

    Every outer iteration is framed by HOLD(i) ... UNHOLD, with one SLIDE per
    element shifted right.
    """
    work = list(objects)
    for i in range(1, len(work)):
        held = work[i]
        step_sink.emit(AlgorithmStep.hold(i))
        held_value = _trait_at(work, i, trait)
        a = i
        while a > 0 and held_value < _trait_at(work, a - 1, trait):
            step_sink.emit(AlgorithmStep.slide(a - 1, a))
            work[a] = work[a - 1]
            a -= 1
        step_sink.emit(AlgorithmStep.unhold())
        work[a] = held
    return work


def selection_sort(objects: Sequence[T], trait: Trait, step_sink: StepSink) -> list[T]:
    # Strict less-than: among equal minimums the first one found wins.
    work = list(objects)
    n = len(work)
    for x in range(n - 1):
        lowest = x
        for y in range(x + 1, n):
            step_sink.emit(AlgorithmStep.compare_highlight(y, x, Intensity.SMALL))
            if _trait_at(work, y, trait) < _trait_at(work, lowest, trait):
                lowest = y
        if x != lowest:
            work[x], work[lowest] = work[lowest], work[x]
            step_sink.emit(AlgorithmStep.compare_highlight(x, lowest, Intensity.LARGE))
            step_sink.emit(AlgorithmStep.swap(x, lowest))
    return work


def merge_sort(
    objects: Sequence[T],
    trait: Trait,
    step_sink: StepSink,
    index_offset: int = 0,
) -> list[T]:
    """
    Top-down merge sort.

    index_offset is the absolute position of objects[0] in the original
    array, so every emitted index is in original coordinates.
    """
    if len(objects) <= 1:
        return list(objects)
    middle = len(objects) // 2
    left = merge_sort(objects[:middle], trait, step_sink, index_offset)
    right = merge_sort(objects[middle:], trait, step_sink, index_offset + middle)
    return _merge(
        left,
        right,
        left_offset=index_offset,
        right_offset=index_offset + middle,
        trait=trait,
        step_sink=step_sink,
    )


def _merge(
    left: list[T],
    right: list[T],
    *,
    left_offset: int,
    right_offset: int,
    trait: Trait,
    step_sink: StepSink,
) -> list[T]:
    li = 0
    ri = 0
    joined: list[T] = []

    def _take_left() -> None:
        nonlocal li
        step_sink.emit(AlgorithmStep.move_to_joining_area(left_offset + li, left_offset + len(joined)))
        joined.append(left[li])
        li += 1

    def _take_right() -> None:
        nonlocal ri
        step_sink.emit(AlgorithmStep.move_to_joining_area(right_offset + ri, left_offset + len(joined)))
        joined.append(right[ri])
        ri += 1

    while li < len(left) and ri < len(right):
        left_value = _trait_at(left, li, trait, offset=left_offset)
        right_value = _trait_at(right, ri, trait, offset=right_offset)

        # Ties go to the left run, which keeps the sort stable.
        if left_value <= right_value:
            _take_left()
        else:
            _take_right()

    while li < len(left):
        _take_left()
    while ri < len(right):
        _take_right()

    step_sink.emit(AlgorithmStep.merge_complete())
    return joined


def stupid_sort(
    objects: Sequence[T],
    step_sink: StepSink,
    passes: int = STUPID_SORT_PASSES,
    rng: random.Random | None = None,
) -> list[T]:
    """
    Not a sort: a few shuffle passes to show how bad guessing is.

    Each pass shuffles the result of the previous one, so replaying every
    emitted swap lands on the returned order. Never looks at traits.
    """
    rng = rng if rng is not None else random.Random()
    work = list(objects)
    for _ in range(passes):
        work = shuffle_steps(work, step_sink, rng=rng)
    return work
