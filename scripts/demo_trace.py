from __future__ import annotations

from emoji_sort.models import Trait, demo_emojis
from emoji_sort.replay import replay
from emoji_sort.sorter import Algorithm, sort


def main() -> None:
    emojis = demo_emojis()
    trait = Trait.HAPPINESS

    algorithm = Algorithm.BUBBLE_SORT
    # Walk the demo cycle once, stopping before the shuffle-only "sort".
    while algorithm != Algorithm.STUPID_SORT:
        steps = sort(emojis, trait, algorithm)
        final = replay(emojis, steps)

        print(f"\n{algorithm.description} | steps={len(steps)}")
        for i, s in enumerate(steps, start=1):
            print(f"  {i:3d} {s.describe()}")
        print("  result: " + " ".join(f"{e.symbol}({e.trait_value(trait):.0f})" for e in final))

        algorithm = algorithm.next()


if __name__ == "__main__":
    main()
