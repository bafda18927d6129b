from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

from emoji_sort.models import Emoji, Trait
from emoji_sort.steps import INDEX_ARITY, AlgorithmStep, Intensity, StepType


class InputFormatError(ValueError):
    """Raised when an items file or step stream fails validation."""


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise InputFormatError(f"file not found: {path}")
    if not path.is_file():
        raise InputFormatError(f"not a file: {path}")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InputFormatError(
            f"invalid JSON: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e


def load_items(path: Path) -> list[Emoji]:
    """Load and validate a list of sortable emojis.

    Format:
      {
        "items": [
          {"symbol": "😂", "traits": {"happiness": 9, "silliness": 8}},
          {"symbol": "😢", "traits": {"sadness": 9}},
          ...
        ]
      }

    A bare top-level array of item objects is also accepted. Traits may be
    omitted per item; sorting by a trait an item lacks fails at sort time,
    not at load time.
    """
    raw = _read_json(path)
    if isinstance(raw, dict):
        raw = raw.get("items")
    if not isinstance(raw, list):
        raise InputFormatError("items must be a JSON array (or an object with an 'items' array)")

    items: list[Emoji] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise InputFormatError(f"items[{i}] must be an object")

        symbol = item.get("symbol")
        if not isinstance(symbol, str) or not symbol.strip():
            raise InputFormatError(f"items[{i}].symbol must be a non-empty string")

        traits_raw = item.get("traits", {})
        if not isinstance(traits_raw, dict):
            raise InputFormatError(f"items[{i}].traits must be an object")

        traits: dict[Trait, float] = {}
        for k, v in traits_raw.items():
            try:
                trait = Trait(str(k).strip().lower())
            except ValueError as e:
                raise InputFormatError(f"items[{i}].traits has unknown trait {k!r}") from e
            # bool is an int subclass; reject it explicitly.
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise InputFormatError(f"items[{i}].traits[{k!r}] must be a number")
            if not math.isfinite(v):
                raise InputFormatError(f"items[{i}].traits[{k!r}] must be a finite number")
            traits[trait] = float(v)

        items.append(Emoji(symbol=symbol, traits=traits))

    return items


def dump_steps(steps: list[AlgorithmStep]) -> list[dict[str, Any]]:
    """Return a JSON-serializable step stream (one object per step, in order)."""
    out: list[dict[str, Any]] = []
    for s in steps:
        d: dict[str, Any] = {"type": s.type.value, "indices": list(s.indices)}
        if s.intensity is not None:
            d["intensity"] = s.intensity.value
        out.append(d)
    return out


def load_steps(path: Path) -> list[AlgorithmStep]:
    """Load and validate a step stream written by dump_steps()."""
    raw = _read_json(path)
    if not isinstance(raw, list):
        raise InputFormatError("root must be a JSON array of steps")

    steps: list[AlgorithmStep] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise InputFormatError(f"step[{i}] must be an object")

        stype = item.get("type")
        indices = item.get("indices", [])
        intensity = item.get("intensity", None)

        if not isinstance(stype, str):
            raise InputFormatError(f"step[{i}].type must be a string")
        try:
            step_type = StepType(stype)
        except ValueError as e:
            raise InputFormatError(f"step[{i}].type is not a valid StepType: {stype!r}") from e

        if not isinstance(indices, list) or not all(
            isinstance(x, int) and not isinstance(x, bool) and x >= 0 for x in indices
        ):
            raise InputFormatError(f"step[{i}].indices must be an array of ints >= 0")
        if len(indices) != INDEX_ARITY[step_type]:
            raise InputFormatError(
                f"step[{i}] {step_type.value} needs {INDEX_ARITY[step_type]} indices (got {len(indices)})"
            )

        parsed_intensity: Intensity | None = None
        if step_type == StepType.COMPARE_HIGHLIGHT:
            try:
                parsed_intensity = Intensity(intensity)
            except ValueError as e:
                raise InputFormatError(f"step[{i}].intensity must be SMALL or LARGE") from e
        elif intensity is not None:
            raise InputFormatError(f"step[{i}].intensity is only valid on COMPARE_HIGHLIGHT")

        steps.append(AlgorithmStep(step_type, tuple(indices), parsed_intensity))

    return steps
