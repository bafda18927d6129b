from __future__ import annotations

import json
from pathlib import Path

import pytest

from emoji_sort.models import Trait
from emoji_sort.sorter import Algorithm, sort
from emoji_sort.steps import AlgorithmStep, Intensity
from emoji_sort.stream_io import InputFormatError, dump_steps, load_items, load_steps

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_load_items_happy_path_sample_file() -> None:
    items = load_items(REPO_ROOT / "samples" / "demo_items.json")
    assert len(items) == 5
    assert items[0].symbol == "😐"
    assert items[0].trait_value(Trait.HAPPINESS) == 5.0
    # Absent traits stay absent.
    assert items[0].trait_value(Trait.LOVE) is None


def test_load_items_accepts_bare_array(tmp_path: Path) -> None:
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"symbol": "x", "traits": {"HAPPINESS": 1}}]), encoding="utf-8")

    items = load_items(path)
    assert items[0].trait_value(Trait.HAPPINESS) == 1.0


@pytest.mark.parametrize(
    "payload",
    [
        {"items": "nope"},
        [{"traits": {}}],
        [{"symbol": "x", "traits": {"grumpiness": 1}}],
        [{"symbol": "x", "traits": {"happiness": "high"}}],
        [{"symbol": "x", "traits": {"happiness": True}}],
        [{"symbol": "x", "traits": []}],
        [{"symbol": "x", "traits": {"happiness": float("nan")}}],
        [{"symbol": "x", "traits": {"happiness": float("inf")}}],
    ],
)
def test_load_items_rejects_bad_payloads(tmp_path: Path, payload: object) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_items(path)


def test_load_items_rejects_missing_file_and_bad_json(tmp_path: Path) -> None:
    with pytest.raises(InputFormatError):
        load_items(tmp_path / "missing.json")

    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_items(path)


def test_dumped_steps_load_back_unchanged(tmp_path: Path) -> None:
    items = load_items(REPO_ROOT / "samples" / "demo_items.json")
    steps = sort(items, Trait.HAPPINESS, Algorithm.MERGE_SORT) + sort(
        items, Trait.HAPPINESS, Algorithm.BUBBLE_SORT
    )

    path = tmp_path / "steps.json"
    path.write_text(json.dumps(dump_steps(steps)), encoding="utf-8")

    assert load_steps(path) == steps


def test_dump_steps_shape() -> None:
    dumped = dump_steps([AlgorithmStep.compare_highlight(1, 0, Intensity.LARGE), AlgorithmStep.unhold()])
    assert dumped == [
        {"type": "COMPARE_HIGHLIGHT", "indices": [1, 0], "intensity": "LARGE"},
        {"type": "UNHOLD", "indices": []},
    ]


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "SWAP"},
        [{"type": "TELEPORT", "indices": []}],
        [{"type": "SWAP", "indices": [0]}],
        [{"type": "SWAP", "indices": [0, -1]}],
        [{"type": "COMPARE_HIGHLIGHT", "indices": [0, 1]}],
        [{"type": "SWAP", "indices": [0, 1], "intensity": "SMALL"}],
    ],
)
def test_load_steps_rejects_bad_streams(tmp_path: Path, payload: object) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_steps(path)


def test_load_items_rejects_non_finite_literals(tmp_path: Path) -> None:
    path = tmp_path / "nan.json"
    path.write_text(
        '[{"symbol": "a", "traits": {"happiness": 3}},'
        ' {"symbol": "b", "traits": {"happiness": NaN}},'
        ' {"symbol": "c", "traits": {"happiness": 1}}]',
        encoding="utf-8",
    )
    with pytest.raises(InputFormatError, match="finite"):
        load_items(path)
