from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum


class Trait(str, Enum):
    """
    Comparable facets an item can be sorted by.
    """

    HAPPINESS = "happiness"
    SADNESS = "sadness"
    ANGER = "anger"
    SURPRISE = "surprise"
    LOVE = "love"
    SILLINESS = "silliness"


class TraitSortable(ABC):
    """
    Anything the sorter can order.

    The sorter only ever reads trait values; it never mutates items.
    """

    @abstractmethod
    def trait_value(self, trait: Trait) -> float | None: ...


@dataclass(frozen=True)
class Emoji(TraitSortable):
    symbol: str
    # Missing keys are allowed; sorting by a missing trait fails at comparison time.
    traits: dict[Trait, float] = field(default_factory=dict)

    def trait_value(self, trait: Trait) -> float | None:
        return self.traits.get(trait)


def demo_emojis() -> list[Emoji]:
    # Deterministic demo roster
    return [
        Emoji("😐", {Trait.HAPPINESS: 5.0, Trait.SADNESS: 5.0, Trait.ANGER: 2.0}),
        Emoji("😡", {Trait.HAPPINESS: 1.0, Trait.SADNESS: 4.0, Trait.ANGER: 10.0}),
        Emoji("😂", {Trait.HAPPINESS: 9.0, Trait.SADNESS: 1.0, Trait.SILLINESS: 8.0}),
        Emoji("😢", {Trait.HAPPINESS: 2.0, Trait.SADNESS: 9.0, Trait.ANGER: 1.0}),
        Emoji("😍", {Trait.HAPPINESS: 8.0, Trait.LOVE: 10.0, Trait.SADNESS: 0.0}),
        Emoji("😮", {Trait.HAPPINESS: 6.0, Trait.SURPRISE: 9.0, Trait.SADNESS: 2.0}),
        Emoji("🙃", {Trait.HAPPINESS: 7.0, Trait.SILLINESS: 7.0, Trait.SADNESS: 3.0}),
    ]
