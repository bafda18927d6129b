from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from emoji_sort.steps import AlgorithmStep


class StepSink(ABC):
    """
    Consumer of algorithm steps.
    Algorithms write every move here so they keep no state of their own.
    """

    @abstractmethod
    def emit(self, step: AlgorithmStep) -> None: ...


@dataclass
class InMemoryStepSink(StepSink):
    """
    Per-call accumulator.
    Owned by whoever starts the sort, so concurrent sorts never share a buffer.
    """

    steps: list[AlgorithmStep] = field(default_factory=list)

    def emit(self, step: AlgorithmStep) -> None:
        self.steps.append(step)

    def __len__(self) -> int:
        return len(self.steps)
