from __future__ import annotations

from emoji_sort.models import Trait


class SortError(ValueError):
    """Base class for sort precondition failures."""


class EmptyInputError(SortError):
    """Raised when sort() is given no items."""

    def __init__(self) -> None:
        super().__init__("cannot sort an empty list of items")


class MissingTraitError(SortError):
    """Raised at the first comparison that needs a trait an item does not have."""

    def __init__(self, trait: Trait, index: int) -> None:
        self.trait = trait
        self.index = index
        super().__init__(f"item at position {index} has no value for trait {trait.value!r}")
