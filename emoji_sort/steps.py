from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StepType(str, Enum):
    """
    Closed vocabulary of replayable sorting moves.
    A renderer must understand every member; keep it small.
    """

    COMPARE_HIGHLIGHT = "COMPARE_HIGHLIGHT"
    SWAP = "SWAP"
    HOLD = "HOLD"
    UNHOLD = "UNHOLD"
    SLIDE = "SLIDE"
    MOVE_TO_JOINING_AREA = "MOVE_TO_JOINING_AREA"
    MERGE_COMPLETE = "MERGE_COMPLETE"


class Intensity(str, Enum):
    # SMALL: plain comparison. LARGE: the comparison triggered a swap.
    SMALL = "SMALL"
    LARGE = "LARGE"


# Number of positional indices each step type carries.
INDEX_ARITY: dict[StepType, int] = {
    StepType.COMPARE_HIGHLIGHT: 2,
    StepType.SWAP: 2,
    StepType.HOLD: 1,
    StepType.UNHOLD: 0,
    StepType.SLIDE: 2,
    StepType.MOVE_TO_JOINING_AREA: 2,
    StepType.MERGE_COMPLETE: 0,
}


@dataclass(frozen=True, slots=True)
class AlgorithmStep:
    """
    One atomic move in a sort trace.

    indices are absolute positions in the original-length array:
      - COMPARE_HIGHLIGHT: (i, j), plus intensity
      - SWAP: (i, j)
      - HOLD: (i,)
      - SLIDE: (from, to)
      - MOVE_TO_JOINING_AREA: (from, joining_index)
      - UNHOLD, MERGE_COMPLETE: ()
    Steps carry no timing; pacing belongs to the renderer.
    """

    type: StepType
    indices: tuple[int, ...] = ()
    intensity: Intensity | None = None

    @classmethod
    def compare_highlight(cls, i: int, j: int, intensity: Intensity) -> AlgorithmStep:
        return cls(StepType.COMPARE_HIGHLIGHT, (i, j), intensity)

    @classmethod
    def swap(cls, i: int, j: int) -> AlgorithmStep:
        return cls(StepType.SWAP, (i, j))

    @classmethod
    def hold(cls, i: int) -> AlgorithmStep:
        return cls(StepType.HOLD, (i,))

    @classmethod
    def unhold(cls) -> AlgorithmStep:
        return cls(StepType.UNHOLD)

    @classmethod
    def slide(cls, from_index: int, to_index: int) -> AlgorithmStep:
        return cls(StepType.SLIDE, (from_index, to_index))

    @classmethod
    def move_to_joining_area(cls, from_index: int, joining_index: int) -> AlgorithmStep:
        return cls(StepType.MOVE_TO_JOINING_AREA, (from_index, joining_index))

    @classmethod
    def merge_complete(cls) -> AlgorithmStep:
        return cls(StepType.MERGE_COMPLETE)

    def describe(self) -> str:
        """Short human-readable form, e.g. ``SWAP 3<->2``."""
        t = self.type
        if t == StepType.COMPARE_HIGHLIGHT:
            i, j = self.indices
            weight = self.intensity.value if self.intensity is not None else "?"
            return f"COMPARE {i}?{j} ({weight})"
        if t == StepType.SWAP:
            return f"SWAP {self.indices[0]}<->{self.indices[1]}"
        if t == StepType.HOLD:
            return f"HOLD {self.indices[0]}"
        if t == StepType.SLIDE:
            return f"SLIDE {self.indices[0]}->{self.indices[1]}"
        if t == StepType.MOVE_TO_JOINING_AREA:
            return f"JOIN {self.indices[0]}->[{self.indices[1]}]"
        return t.value
