"""JSON helpers for plain values and dataclass instances."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, TypeVar

T = TypeVar("T")


class SerializationError(Exception):
    """Raised when JSON cannot be decoded into the requested type."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the compact JSON representation of *obj*.

    Examples:
        get_json([1, 2, 3])                 # '[1,2,3]'
        get_json({"width": 10, "height": 20})  # '{"width":10,"height":20}'
    """
    return json.dumps(obj, separators=(",", ":"), default=_default)


def from_json(cls: type[T], source: str) -> T:
    """Build an instance of *cls* from a JSON string.

    A JSON object is passed as keyword arguments, an array as positional
    arguments and any other value as the single positional argument.
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON for {cls.__name__}: {exc}", cause=exc) from exc

    try:
        if isinstance(data, dict):
            return cls(**data)
        if isinstance(data, list):
            return cls(*data)
        return cls(data)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot build {cls.__name__} from {data!r}: {exc}", cause=exc
        ) from exc
