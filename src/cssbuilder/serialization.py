"""JSON helpers for plain values and dataclass-like records."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


def to_json(obj: Any) -> str:
    """Serialize *obj* to compact JSON.

    Dataclass instances are converted with :func:`dataclasses.asdict` first.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = dataclasses.asdict(obj)
    return json.dumps(obj, separators=(",", ":"))


def from_json(cls: type[T], text: str) -> T:
    """Rebuild an instance of *cls* from a JSON object.

    The object's values are passed to the constructor positionally, in
    document order, so ``'{"width": 10, "height": 20}'`` becomes
    ``cls(10, 20)``.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    return cls(*data.values())
