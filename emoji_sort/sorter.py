from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Sequence

from emoji_sort.algorithms import (
    STUPID_SORT_PASSES,
    bubble_sort,
    insertion_sort,
    merge_sort,
    selection_sort,
    stupid_sort,
)
from emoji_sort.errors import EmptyInputError
from emoji_sort.models import Trait, TraitSortable
from emoji_sort.step_sink import InMemoryStepSink
from emoji_sort.steps import AlgorithmStep

logger = logging.getLogger(__name__)

RANDOMISE_PASSES = 3


class Algorithm(str, Enum):
    """
    Sorting algorithms the sorter can trace.

    Declaration order is the demo cycle order used by next().
    """

    BUBBLE_SORT = "bubble-sort"
    INSERTION_SORT = "insertion-sort"
    SELECTION_SORT = "selection-sort"
    MERGE_SORT = "merge-sort"
    STUPID_SORT = "stupid-sort"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def next(self) -> Algorithm:
        return _SUCCESSORS[self]

    @classmethod
    def parse(cls, text: str) -> Algorithm:
        """Accept an enum value ("merge-sort") or a display name ("Merge Sort")."""
        key = (text or "").strip().lower().replace("_", "-").replace(" ", "-")
        for algorithm in cls:
            if key == algorithm.value:
                return algorithm
        raise ValueError(f"unknown algorithm: {text!r}")


_DESCRIPTIONS: dict[Algorithm, str] = {
    Algorithm.BUBBLE_SORT: "Bubble Sort",
    Algorithm.INSERTION_SORT: "Insertion Sort",
    Algorithm.SELECTION_SORT: "Selection Sort",
    Algorithm.MERGE_SORT: "Merge Sort",
    Algorithm.STUPID_SORT: "Stupid Sort",
}

_SUCCESSORS: dict[Algorithm, Algorithm] = {
    Algorithm.BUBBLE_SORT: Algorithm.INSERTION_SORT,
    Algorithm.INSERTION_SORT: Algorithm.SELECTION_SORT,
    Algorithm.SELECTION_SORT: Algorithm.MERGE_SORT,
    Algorithm.MERGE_SORT: Algorithm.STUPID_SORT,
    Algorithm.STUPID_SORT: Algorithm.BUBBLE_SORT,
}


def sort(
    objects: Sequence[TraitSortable],
    trait: Trait,
    algorithm: Algorithm | str,
    *,
    rng: random.Random | None = None,
    passes: int = STUPID_SORT_PASSES,
) -> list[AlgorithmStep]:
    """
    Return the steps that reproduce sorting objects by trait with algorithm.

    The returned list is not the sorted objects: it is the trace a renderer
    replays. objects is never mutated.

    Raises:
      - EmptyInputError if objects is empty
      - MissingTraitError at the first comparison involving an item without trait
        (no partial trace is returned)

    rng and passes only affect STUPID_SORT.
    """
    # Plain strings such as "merge-sort" are accepted; unknown names raise ValueError.
    algorithm = Algorithm(algorithm)
    if len(objects) == 0:
        raise EmptyInputError()

    logger.debug("sorting %d items by %s using %s", len(objects), trait.value, algorithm.description)

    # Fresh sink per call: nothing is shared between concurrent sorts.
    sink = InMemoryStepSink()
    if algorithm == Algorithm.BUBBLE_SORT:
        bubble_sort(objects, trait, sink)
    elif algorithm == Algorithm.INSERTION_SORT:
        insertion_sort(objects, trait, sink)
    elif algorithm == Algorithm.SELECTION_SORT:
        selection_sort(objects, trait, sink)
    elif algorithm == Algorithm.MERGE_SORT:
        # The merged list is discarded; only the trace matters.
        merge_sort(objects, trait, sink)
    elif algorithm == Algorithm.STUPID_SORT:
        stupid_sort(objects, sink, passes=passes, rng=rng)
    else:
        raise ValueError(f"unsupported algorithm: {algorithm!r}")

    logger.debug("%s produced %d steps", algorithm.description, len(sink))
    return sink.steps


def randomise_positions(
    objects: Sequence[TraitSortable],
    *,
    rng: random.Random | None = None,
    passes: int = RANDOMISE_PASSES,
) -> list[AlgorithmStep]:
    """
    Shuffle steps for objects. Never fails; fewer than two items yield no steps.
    """
    sink = InMemoryStepSink()
    stupid_sort(objects, sink, passes=passes, rng=rng)
    logger.debug("randomised %d items in %d steps", len(objects), len(sink))
    return sink.steps
