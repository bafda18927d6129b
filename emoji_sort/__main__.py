from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from emoji_sort.algorithms import STUPID_SORT_PASSES
from emoji_sort.errors import SortError
from emoji_sort.models import Emoji, Trait, demo_emojis
from emoji_sort.replay import replay
from emoji_sort.sorter import RANDOMISE_PASSES, Algorithm, randomise_positions, sort
from emoji_sort.steps import AlgorithmStep
from emoji_sort.stream_io import InputFormatError, dump_steps, load_items


def _load_roster(args: argparse.Namespace) -> list[Emoji] | None:
    chosen = sum(1 for v in [bool(args.demo), bool(args.items)] if v)
    if chosen != 1:
        print("ERROR: choose exactly one of --demo or --items.", file=sys.stderr)
        return None

    if args.demo:
        return demo_emojis()
    try:
        return load_items(Path(str(args.items)))
    except InputFormatError as e:
        print(f"ERROR: invalid items file: {e}", file=sys.stderr)
        return None


def _rng(args: argparse.Namespace) -> random.Random:
    return random.Random(args.seed) if args.seed is not None else random.Random()


def _render_text_report(*, title: str, items: list[Emoji], steps: list[AlgorithmStep]) -> str:
    out: list[str] = [title, "  start: " + " ".join(e.symbol for e in items)]

    if not steps:
        out.append("  (No steps. Nothing to move.)")

    width = len(str(len(steps)))
    for i, s in enumerate(steps, start=1):
        out.append(f"  {str(i).rjust(width)}: {s.describe()}")

    final = replay(items, steps)
    out.append("  end:   " + " ".join(e.symbol for e in final))
    return "\n".join(out) + "\n"


def _write_result(args: argparse.Namespace, *, title: str, items: list[Emoji], steps: list[AlgorithmStep]) -> None:
    if args.json:
        sys.stdout.write(json.dumps(dump_steps(steps), indent=2) + "\n")
    else:
        sys.stdout.write(_render_text_report(title=title, items=items, steps=steps))


def _cmd_sort(args: argparse.Namespace) -> int:
    items = _load_roster(args)
    if items is None:
        return 2

    try:
        trait = Trait(str(args.trait).strip().lower())
    except ValueError:
        print(f"ERROR: unknown trait {args.trait!r}", file=sys.stderr)
        return 2
    try:
        algorithm = Algorithm.parse(str(args.algorithm))
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        steps = sort(items, trait, algorithm, rng=_rng(args), passes=int(args.passes))
    except SortError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    _write_result(args, title=f"{algorithm.description} by {trait.value}", items=items, steps=steps)
    return 0


def _cmd_randomise(args: argparse.Namespace) -> int:
    items = _load_roster(args)
    if items is None:
        return 2

    steps = randomise_positions(items, rng=_rng(args), passes=int(args.passes))
    _write_result(args, title="Randomise positions", items=items, steps=steps)
    return 0


def _cmd_algorithms(args: argparse.Namespace) -> int:
    for algorithm in Algorithm:
        sys.stdout.write(f"{algorithm.value:<16s} {algorithm.description:<16s} next: {algorithm.next().value}\n")
    return 0


def _add_roster_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--demo", action="store_true", help="Use the built-in deterministic emoji roster.")
    p.add_argument("--items", type=str, help="Load items from a JSON file.")
    p.add_argument("--seed", type=int, default=None, help="Seed for shuffle-based algorithms.")
    p.add_argument("--json", action="store_true", help="Print the step stream as JSON instead of text.")


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="emoji_sort",
        description=(
            "EmojiSort step engine: trace harness.\n"
            "\n"
            "Prints the replayable steps a sorting algorithm performs.\n"
            "Rendering is left to the consumer."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr.")

    sub = parser.add_subparsers(dest="command", required=True)

    s = sub.add_parser("sort", help="Trace a sort of the roster by one trait.")
    _add_roster_args(s)
    s.add_argument("--trait", type=str, default=Trait.HAPPINESS.value, help="Trait to sort by.")
    s.add_argument(
        "--algorithm",
        type=str,
        default=Algorithm.BUBBLE_SORT.value,
        help="One of: " + ", ".join(a.value for a in Algorithm),
    )
    s.add_argument(
        "--passes",
        type=int,
        default=STUPID_SORT_PASSES,
        help="Shuffle passes for stupid-sort (ignored by the other algorithms).",
    )
    s.set_defaults(func=_cmd_sort)

    r = sub.add_parser("randomise", help="Trace a shuffle of the roster.")
    _add_roster_args(r)
    r.add_argument("--passes", type=int, default=RANDOMISE_PASSES, help="Number of shuffle passes.")
    r.set_defaults(func=_cmd_randomise)

    a = sub.add_parser("algorithms", help="List algorithms in demo cycle order.")
    a.set_defaults(func=_cmd_algorithms)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
