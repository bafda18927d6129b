from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from emoji_sort.steps import INDEX_ARITY, AlgorithmStep, StepType

T = TypeVar("T")


class ReplayError(ValueError):
    """Raised when a step sequence cannot be applied to an array."""


def replay(values: Sequence[T], steps: Iterable[AlgorithmStep]) -> list[T]:
    """
    Apply steps literally to a copy of values, the way a renderer would.

    Rules:
      - COMPARE_HIGHLIGHT: no change
      - SWAP(i, j): exchange positions i and j
      - HOLD(i): lift the element at i into a single held slot
      - SLIDE(a, b): the element at a moves to b
      - UNHOLD: the held element drops into the one position left vacant
      - MOVE_TO_JOINING_AREA(a, k): joining_area[k] = array[a]
      - MERGE_COMPLETE: the joining area collapses back into the array

    Structural checks (ReplayError):
      - every index in [0, len(values))
      - HOLD never nests; UNHOLD needs an open HOLD
      - a trace may not end with an open HOLD or unflushed joining area
    """
    work = list(values)
    n = len(work)

    held: T | None = None
    holding = False
    vacant: int | None = None
    joining: dict[int, T] = {}

    for pos, step in enumerate(steps):
        arity = INDEX_ARITY.get(step.type)
        if arity is None:
            raise ReplayError(f"step[{pos}] has unknown type {step.type!r}")
        if len(step.indices) != arity:
            raise ReplayError(f"step[{pos}] {step.type.value} expects {arity} indices, got {len(step.indices)}")
        for idx in step.indices:
            if not 0 <= idx < n:
                raise ReplayError(f"step[{pos}] index {idx} out of range for {n} items")

        t = step.type
        if t == StepType.COMPARE_HIGHLIGHT:
            continue

        if t == StepType.SWAP:
            i, j = step.indices
            work[i], work[j] = work[j], work[i]

        elif t == StepType.HOLD:
            if holding:
                raise ReplayError(f"step[{pos}] HOLD while another element is held")
            holding = True
            vacant = step.indices[0]
            held = work[vacant]

        elif t == StepType.SLIDE:
            src, dst = step.indices
            work[dst] = work[src]
            if holding:
                vacant = src

        elif t == StepType.UNHOLD:
            if not holding or vacant is None:
                raise ReplayError(f"step[{pos}] UNHOLD without an open HOLD")
            work[vacant] = held  # type: ignore[assignment]
            holding = False
            held = None
            vacant = None

        elif t == StepType.MOVE_TO_JOINING_AREA:
            src, k = step.indices
            if k in joining:
                raise ReplayError(f"step[{pos}] joining area slot {k} already filled")
            joining[k] = work[src]

        elif t == StepType.MERGE_COMPLETE:
            for k, v in joining.items():
                work[k] = v
            joining = {}

    if holding:
        raise ReplayError("trace ended with an open HOLD")
    if joining:
        raise ReplayError("trace ended with elements left in the joining area")
    return work
