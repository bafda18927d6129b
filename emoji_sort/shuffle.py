from __future__ import annotations

import random
from typing import Sequence, TypeVar

from emoji_sort.step_sink import StepSink
from emoji_sort.steps import AlgorithmStep

T = TypeVar("T")


def shuffle_steps(
    objects: Sequence[T],
    step_sink: StepSink,
    rng: random.Random | None = None,
) -> list[T]:
    """
    One unbiased Fisher-Yates pass over a private copy of objects.

    For each position i (except the last), draw d uniformly from
    [0, remaining) where remaining counts the unshuffled suffix including i.
    d == 0 is a no-op and emits nothing; otherwise swap(i, i + d) is emitted
    and applied.

    Returns the shuffled copy. Lists of 0 or 1 items emit nothing.
    """
    rng = rng if rng is not None else random.Random()
    work = list(objects)
    n = len(work)
    if n <= 1:
        return work

    for i, remaining in zip(range(n), range(n, 1, -1)):
        d = rng.randrange(remaining)
        if d == 0:
            continue
        j = i + d
        work[i], work[j] = work[j], work[i]
        step_sink.emit(AlgorithmStep.swap(i, j))
    return work
